import os
import csv
import shutil
import logging
from typing import BinaryIO, List

from core.store import Row


def save_upload(source: BinaryIO, upload_dir: str, filename: str) -> str:
    """
    Writes the uploaded stream to <upload_dir>/<filename>, replacing any
    earlier upload with the same name. Returns the destination path.
    """
    os.makedirs(upload_dir, exist_ok=True)
    destination = os.path.join(upload_dir, filename)
    source.seek(0)
    with open(destination, "wb") as out:
        shutil.copyfileobj(source, out)
    logging.info(f"Saved upload to {destination}")
    return destination


def _clean_row(header: List[str], cells: List[str]) -> Row:
    # Missing trailing cells are left out; extra cells are keyed by position, e.g. "_2"
    row = dict(zip(header, cells))
    for index in range(len(header), len(cells)):
        row[f"_{index}"] = cells[index]
    return row


def parse_csv_file(path: str) -> List[Row]:
    """
    Parse a CSV file into a list of dict rows keyed by the header line.
    Every key and value is a string, even for ragged lines.
    """
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f)
        header = next(reader, [])
        rows = [_clean_row(header, cells) for cells in reader if cells]
    logging.info(f"CSV parsed: {len(rows)} rows from {path}")
    return rows


def is_csv_filename(filename: str) -> bool:
    return filename.lower().endswith(".csv")
