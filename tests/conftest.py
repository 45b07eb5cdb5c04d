"""Shared fixtures: a complete current-version DSL document and a resume record."""

import pytest


@pytest.fixture
def modern_dsl():
    """Two-column 70-30 document with accent-border headings and a blue accent."""
    return {
        "version": "1.1.0",
        "layout": {
            "type": "two-column",
            "paperSize": "a4",
            "margins": "normal",
            "columnDistribution": "70-30",
            "pageBreakBehavior": "auto",
            "showPageNumbers": False,
            "pageNumberPosition": "bottom-center",
        },
        "tokens": {
            "typography": {
                "fontFamily": {"heading": "inter", "body": "inter"},
                "fontSize": "base",
                "headingStyle": "accent-border",
            },
            "colors": {
                "colors": {
                    "primary": "#3B82F6",
                    "secondary": "#64748B",
                    "background": "#FFFFFF",
                    "surface": "#F8FAFC",
                    "text": {"primary": "#0F172A", "secondary": "#475569", "accent": "#3B82F6"},
                    "border": "#E2E8F0",
                    "divider": "#E2E8F0",
                },
                "borderRadius": "md",
                "shadows": "subtle",
            },
            "spacing": {
                "density": "comfortable",
                "sectionGap": "lg",
                "itemGap": "md",
                "contentPadding": "md",
            },
        },
        "sections": [
            {"id": "summary", "visible": True, "order": 0, "column": "main"},
            {"id": "experience", "visible": True, "order": 1, "column": "main"},
            {"id": "education", "visible": True, "order": 2, "column": "main"},
            {"id": "skills", "visible": True, "order": 3, "column": "sidebar"},
        ],
        "itemOverrides": {},
    }


@pytest.fixture
def resume_data():
    """Resume record as a data provider returns it."""
    return {
        "id": "resume-1",
        "userId": "user-1",
        "slug": "jane-doe",
        "isPublic": True,
        "summary": "Backend engineer focused on data platforms.",
        "experiences": [
            {
                "id": "exp-1",
                "position": "Senior Engineer",
                "company": "Acme",
                "location": "Remote",
                "startDate": "2021-03-01T00:00:00.000Z",
                "endDate": None,
                "isCurrent": True,
                "description": "Owns the ingestion pipeline.",
                "skills": ["Python", "Kafka"],
            },
            {
                "id": "exp-2",
                "position": "Engineer",
                "company": "Initech",
                "startDate": "2018-06-01",
                "endDate": "2021-02-28",
                "isCurrent": False,
            },
        ],
        "education": [
            {
                "id": "edu-1",
                "institution": "State University",
                "degree": "BSc",
                "field": "Computer Science",
                "startDate": "2014-09-01",
                "endDate": "2018-05-31",
            }
        ],
        "skills": [
            {"id": "skill-1", "name": "Python", "category": "Languages", "level": 5},
            {"id": "skill-2", "name": "SQL", "category": "Languages", "level": 4},
        ],
    }
