"""
Vocabulary constants for resume text extraction.

This module contains the fixed word lists and gazetteers the extraction
heuristics rely on. Modify these values to tune precision and recall
without changing code logic.
"""

from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "resume-intel"
APP_DISPLAY_NAME: Final[str] = "Resume Text Intelligence Extraction Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Role Vocabulary
# =============================================================================

# Seniority and role keywords. Matched case-sensitively when detecting
# job titles, case-insensitively when excluding location candidates.
ROLE_KEYWORDS: Final[tuple[str, ...]] = (
    "Engineer",
    "Manager",
    "Developer",
    "Analyst",
    "Director",
    "Lead",
    "Senior",
    "Junior",
    "Specialist",
    "Coordinator",
    "Associate",
    "Consultant",
    "Administrator",
    "Supervisor",
    "Executive",
    "Officer",
    "Representative",
    "Technician",
    "Designer",
    "Architect",
    "Intern",
)

EDUCATION_TERMS: Final[tuple[str, ...]] = (
    "university", "college", "school", "institute", "academy",
    "degree", "bachelor", "master", "phd",
)

# Technology names whose capitalisation collides with place names
TECH_TERMS: Final[tuple[str, ...]] = (
    "javascript", "python", "java", "react", "node", "sql", "html", "css",
    "api", "aws", "docker", "kubernetes", "git", "linux", "windows", "mac",
    "ios", "android", "swift", "kotlin", "angular", "vue", "mongodb",
    "postgresql", "mysql", "redis", "elasticsearch", "typescript", "php",
    "ruby", "rails", "django", "flask", "spring", "express", "laravel",
    "symfony",
)


# =============================================================================
# Section Headings
# =============================================================================

SECTION_HEADINGS: Final[tuple[str, ...]] = (
    "contact information",
    "summary",
    "professional summary",
    "objective",
    "skills",
    "technical skills",
    "core competencies",
    "experience",
    "work experience",
    "professional experience",
    "employment",
    "education",
    "certifications",
    "projects",
    "achievements",
    "awards",
)

# Name of the implicit section holding everything above the first heading
HEADER_SECTION: Final[str] = "header"


# =============================================================================
# Geography
# =============================================================================

MAJOR_CITIES: Final[tuple[str, ...]] = (
    "New York, NY", "Los Angeles, CA", "Chicago, IL", "Houston, TX",
    "Phoenix, AZ", "Philadelphia, PA", "San Antonio, TX", "San Diego, CA",
    "Dallas, TX", "San Jose, CA", "Austin, TX", "Jacksonville, FL",
    "Fort Worth, TX", "Columbus, OH", "San Francisco, CA", "Charlotte, NC",
    "Indianapolis, IN", "Seattle, WA", "Denver, CO", "Washington, DC",
    "Boston, MA", "Nashville, TN", "Baltimore, MD", "Portland, OR",
    "Oklahoma City, OK", "Las Vegas, NV", "Louisville, KY", "Milwaukee, WI",
    "Albuquerque, NM", "Tucson, AZ", "Fresno, CA", "Sacramento, CA",
    "Mesa, AZ", "Kansas City, MO", "Atlanta, GA", "Long Beach, CA",
    "Colorado Springs, CO", "Raleigh, NC", "Miami, FL", "Virginia Beach, VA",
    "Omaha, NE", "Oakland, CA", "Minneapolis, MN", "Tulsa, OK",
    "Arlington, TX", "Tampa, FL", "New Orleans, LA",
)

US_STATE_CODES: Final[frozenset[str]] = frozenset({
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC",
})

# Upper-cased for comparison
COUNTRY_NAMES: Final[frozenset[str]] = frozenset({
    "USA", "UNITED STATES", "CANADA", "UK", "UNITED KINGDOM",
})

REMOTE_LABEL: Final[str] = "Remote"


# =============================================================================
# Dates
# =============================================================================

# Month name or abbreviation -> 0-based month index
MONTH_NUMBERS: Final[dict[str, int]] = {
    "jan": 0, "january": 0,
    "feb": 1, "february": 1,
    "mar": 2, "march": 2,
    "apr": 3, "april": 3,
    "may": 4,
    "jun": 5, "june": 5,
    "jul": 6, "july": 6,
    "aug": 7, "august": 7,
    "sep": 8, "september": 8,
    "oct": 9, "october": 9,
    "nov": 10, "november": 10,
    "dec": 11, "december": 11,
}

PRESENT_TOKENS: Final[tuple[str, ...]] = ("present", "current", "now")
