"""
Default values for the resume builder.

Provides the blank record a new resume starts from. Only the declaration text
is pre-filled; every other field starts empty so no section renders until the
author fills it in.
"""

from resumekit.contexts.modeling.resume_record import Declaration, ResumeRecord

DEFAULT_DECLARATION_TEXT = (
    "I hereby solemnly declare that all statements made above are true and correct "
    "to the best of my knowledge and belief."
)


def new_resume_record() -> ResumeRecord:
    """
    Get the initial record for a new resume.

    Returns:
        ResumeRecord with every field empty except declaration.text
    """
    return ResumeRecord(declaration=Declaration(text=DEFAULT_DECLARATION_TEXT))
