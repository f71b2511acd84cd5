"""
EAN Extraction

Recovers an EAN from the free-text technical information block, where
it is usually entered as a "label; value" line (e.g. "EAN; 7891234567890").
"""


def extract_ean(technical_info: str) -> str:
    """
    Find the EAN in a technical information block.

    The first line mentioning "ean" (any case) wins; its value is the
    text between the first and second ';'.

    Args:
        technical_info: Multi-line "label; value" text

    Returns:
        Trimmed EAN text, or "" when no line mentions it or the line
        has no ';'
    """
    if not technical_info:
        return ""

    for line in technical_info.split("\n"):
        if "ean" not in line.lower():
            continue
        parts = line.split(";")
        if len(parts) < 2:
            return ""
        return parts[1].strip()

    return ""
