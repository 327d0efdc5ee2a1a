import json
from typing import Sequence

from core.store import Row

NO_DATA_PREVIEW = "No CSV data has been uploaded yet."


def render_preview(rows: Sequence[Row], style: str = "pairs", limit: int = 10) -> str:
    """
    Renders at most `limit` rows for the prompt.

    "pairs" writes each row as `column: value` lines with a blank line between
    rows; "json" dumps the rows as a JSON array.
    """
    if not rows:
        return NO_DATA_PREVIEW

    head = list(rows[:limit])
    if style == "json":
        return f"CSV Data (first {limit} rows):\n{json.dumps(head, ensure_ascii=False)}"

    blocks = []
    for row in head:
        blocks.append("\n".join(f"{column}: {value}" for column, value in row.items()))
    return f"CSV Data (first {limit} rows):\n" + "\n\n".join(blocks)


def build_prompt(preview: str, user_query: str) -> str:
    return f"""
    You are a business analytics assistant. Use the CSV data below to answer the user's question.
    If the data does not contain the answer, say so instead of guessing.

    {preview}

    User question: {user_query}
    """
