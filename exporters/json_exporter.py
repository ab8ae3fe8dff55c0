"""JSON exporter for answer sheets (machine-friendly format)."""

import json
from typing import Any, Dict, List

from answers.model import AnswerSheet


def sheet_to_dict(sheet: AnswerSheet) -> Dict[str, Any]:
    """Build the plain mapping shared by the JSON and YAML exporters."""
    answers: List[Dict[str, Any]] = []
    for answer in sheet:
        answers.append({
            "part": answer.part,
            "label": answer.label,
            "value": answer.value,
        })
    
    return {
        "day": sheet.day,
        "title": sheet.title,
        "answers": answers,
    }


def to_json(sheet: AnswerSheet, indent: int = 2) -> str:
    """
    Convert an answer sheet to JSON format.
    
    Args:
        sheet: The answer sheet to export.
        indent: JSON indentation level.
    
    Returns:
        JSON string representation of the sheet.
    """
    return json.dumps(sheet_to_dict(sheet), indent=indent, ensure_ascii=False)
