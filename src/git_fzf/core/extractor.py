"""fzf 输出解析。"""

from __future__ import annotations

from git_fzf.core.errors import OutputParseError

LINE_SEPARATOR = "\n"


def extract_fields(raw_output: str, field_index: int) -> str:
    """从 fzf 输出中提取每行的指定列。

    每行按连续空白切分，取第 field_index 列；空行跳过。

    参数：
        raw_output：fzf 的原始标准输出
        field_index：要提取的列（从 0 开始）

    返回：
        换行连接的结果，末尾带换行；没有任何选中行时返回空字符串

    异常：
        OutputParseError：某行的列数不足 field_index + 1
    """
    values: list[str] = []
    for line_number, line in enumerate(raw_output.strip().split(LINE_SEPARATOR), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) <= field_index:
            raise OutputParseError(line, line_number, field_index)
        values.append(fields[field_index].strip())

    if not values:
        return ""
    return LINE_SEPARATOR.join(values) + LINE_SEPARATOR
