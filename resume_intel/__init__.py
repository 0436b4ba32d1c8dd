"""
resume-intel: heuristic structure extraction for plain-text resumes.

Turns already-extracted resume text into contact channels, sections,
work entries, date ranges and an aggregate experience figure.
"""

from resume_intel.utils.constants import APP_NAME, VERSION

__app_name__ = APP_NAME
__version__ = VERSION
