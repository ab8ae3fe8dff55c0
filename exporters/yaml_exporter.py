"""YAML exporter for answer sheets."""

import yaml

from answers.model import AnswerSheet
from .json_exporter import sheet_to_dict


def to_yaml(sheet: AnswerSheet) -> str:
    """
    Convert an answer sheet to YAML format.
    
    Keys keep the same order as the JSON output.
    """
    return yaml.safe_dump(
        sheet_to_dict(sheet),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
