"""
resumekit - Resume export pipeline for the student portal

Turns the structured resume built in the resume-builder forms into downloadable
documents.

Architecture:
- Modeling Context: Resume record data model and loading
- Planning Context: Section inclusion rules, labels and the markdown preview
- Exporting Context: DOCX and paginated PDF encoders, badge fetch, file delivery
"""

__version__ = "0.1.0"
