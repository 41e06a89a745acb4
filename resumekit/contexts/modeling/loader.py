"""
Resume record loading.

Reads resume records saved as YAML or JSON (the builder's wire form) through
OmegaConf, so interpolations like ${personalInfo.name} resolve on load.
"""

from pathlib import Path
from typing import Union

from omegaconf import DictConfig, OmegaConf

from resumekit.contexts.modeling.exceptions import InvalidResumeRecordError
from resumekit.contexts.modeling.resume_record import ResumeRecord

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def load_resume_record(path: Union[str, Path]) -> ResumeRecord:
    """
    Load a resume record file.

    The record may sit at the root of the file or under a top-level
    'resume' key.

    Args:
        path: Path to a .yaml, .yml or .json record file

    Returns:
        ResumeRecord instance

    Raises:
        FileNotFoundError: If path does not exist
        InvalidResumeRecordError: If the file is not a mapping or has malformed fields
        ValueError: If the suffix is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Resume record not found: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported record format: {path.suffix}. Expected one of {SUPPORTED_SUFFIXES}"
        )

    # JSON is a YAML subset, so OmegaConf.load handles both
    config = OmegaConf.load(path)
    if not isinstance(config, DictConfig):
        raise InvalidResumeRecordError(f"Resume record must be a mapping: {path}")

    data = OmegaConf.to_container(config, resolve=True)
    if "resume" in data and isinstance(data["resume"], dict):
        data = data["resume"]

    return ResumeRecord.from_dict(data)
