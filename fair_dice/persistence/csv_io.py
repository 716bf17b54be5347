"""
csv_io.py
Persistence utilities for writing fair dice protocol transcripts and fairness summaries to CSV files.
"""

import os
import csv
from typing import Dict, List, Any

TRANSCRIPT_HEADER = [
    "run_id", "range", "commitment", "key", "committed_value", "counterpart_value", "result", "verified",
]
SUMMARY_HEADER = [
    "run_id", "timestamp", "check", "range", "samples", "chi_square", "critical_value", "passed",
]

def append_row_to_csv(row: Dict[str, Any], csv_path: str, header: List[str]):
    append_rows_to_csv([row], csv_path, header)

def append_rows_to_csv(rows: List[Dict[str, Any]], csv_path: str, header: List[str]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)

def get_transcript_header():
    return TRANSCRIPT_HEADER.copy()

def get_summary_header():
    return SUMMARY_HEADER.copy()
