"""
Shared fixtures: a complete set of portfolio documents on disk.
"""
import json

import pytest


PROFILE = {
    "name": "Ada Lovelace",
    "description": "Analyst of engines.",
    "email": "ada@example.com",
    "phone": "+44 20 0000 0000",
    "profileImage": "img/ada.jpg",
    "socialMedia": [
        {"platform": "GitHub", "url": "https://github.com/ada"},
        {"platform": "LinkedIn", "url": "https://linkedin.com/in/ada"},
    ],
    "skills": [
        {"name": "Python", "icon": "fab fa-python", "level": 90},
        {"name": "Go", "icon": "i-go"},
    ],
    "cv": {"file": "files/cv.pdf", "icon": "fas fa-file-pdf"},
}

EDUCATION = [
    {
        "university": "University of London",
        "major": "Mathematics",
        "year": "1830 - 1833",
        "description": "Studied with De Morgan.",
        "logo": "img/london.png",
    },
    {
        "university": "Home Tutoring",
        "major": "Sciences",
        "year": "1820 - 1830",
        "description": "Private tutors.",
    },
]

EXPERIENCE = [
    {
        "company": "Analytical Engine",
        "position": "Programmer",
        "year": "1842 - 1843",
        "description": "Wrote the first published algorithm.",
    },
    {
        "company": "Royal Society",
        "position": "Translator",
        "year": 1842,
        "description": "Translated Menabrea's memoir.",
        "logo": "img/rs.png",
    },
]

PROJECTS = [
    {
        "title": "Note G",
        "image": "img/note-g.png",
        "year": "1843",
        "description": "Bernoulli numbers on the engine.",
        "fund": "Self-funded",
        "partner": "Charles Babbage",
        "role": "Author",
        "link": "https://example.com/note-g",
    },
    {
        "title": "Poetical Science",
        "image": "img/poetical.png",
        "year": "1844",
        "description": "Essays.",
    },
]

DOCUMENTS = {
    "profile": PROFILE,
    "education": EDUCATION,
    "experience": EXPERIENCE,
    "projects": PROJECTS,
}


def write_documents(directory, **overrides):
    """Write the four documents, replacing any named in ``overrides``."""
    directory.mkdir(parents=True, exist_ok=True)
    for name, data in {**DOCUMENTS, **overrides}.items():
        (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    return directory


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding all four well-formed documents."""
    return write_documents(tmp_path / "data")
