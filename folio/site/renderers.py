"""Renderers from portfolio records to page operations.

Each renderer is pure: it returns the operations for one container and
leaves applying them to the page. Records are emitted in document order
and optional fields that are absent produce no markup at all.
"""

from folio.site.models import Education, Experience, Profile, Project, Skill
from folio.site.nodes import (
    Append,
    Element,
    Move,
    Operation,
    SetAttrs,
    SetIcon,
    SetText,
    el,
    icon,
)


PROFILE_NAME = "profile-name"
PROFILE_DESCRIPTION = "profile-description"
PROFILE_EMAIL = "profile-email"
PROFILE_PHONE = "profile-phone"
PROFILE_PIC = "profile-pic"
SKILLS_GRID = "skills-grid"
SOCIAL_LINKS = "social-links"
CV_DOWNLOAD = "cv-download"
EDUCATION_LIST = "education-list"
EXPERIENCE_LIST = "experience-list"
PROJECTS_GRID = "projects-grid"
CURRENT_YEAR = "current-year"

CONTAINER_IDS = (
    PROFILE_NAME,
    PROFILE_DESCRIPTION,
    PROFILE_EMAIL,
    PROFILE_PHONE,
    PROFILE_PIC,
    SKILLS_GRID,
    SOCIAL_LINKS,
    CV_DOWNLOAD,
    EDUCATION_LIST,
    EXPERIENCE_LIST,
    PROJECTS_GRID,
    CURRENT_YEAR,
)


def render_profile(profile: Profile) -> list[Operation]:
    ops: list[Operation] = [
        SetText(PROFILE_NAME, profile.name),
        SetText(PROFILE_DESCRIPTION, profile.description),
        SetText(PROFILE_EMAIL, profile.email),
        SetText(PROFILE_PHONE, profile.phone),
        SetAttrs(
            PROFILE_PIC,
            {"src": profile.profileImage, "alt": f"{profile.name}'s profile picture"},
        ),
    ]

    for social in profile.socialMedia:
        link = el(
            "a",
            {"href": social.url, "target": "_blank", "rel": "noopener noreferrer"},
            icon(social.icon_class),
        )
        ops.append(Append(SOCIAL_LINKS, link))

    if profile.skills:
        ops.extend(Append(SKILLS_GRID, _skill_item(skill)) for skill in profile.skills)

    if profile.cv:
        ops.append(SetAttrs(CV_DOWNLOAD, {"href": profile.cv.file, "download": ""}))
        ops.append(SetIcon(CV_DOWNLOAD, profile.cv.icon))
        ops.append(Move(CV_DOWNLOAD, SOCIAL_LINKS))

    return ops


def _skill_item(skill: Skill) -> Element:
    # A level of 0 is treated like a missing level: no bar.
    level_bar = None
    if skill.level:
        level_bar = el(
            "div",
            {"class": "skill-level"},
            el("div", {"class": "skill-level-bar", "style": f"width: {skill.level}%"}),
        )

    return el(
        "div",
        {"class": "skill-item"},
        el("div", {"class": "skill-icon"}, icon(skill.icon)),
        el("div", {}, el("div", {"class": "skill-name"}, skill.name), level_bar),
    )


def render_education(entries: list[Education]) -> list[Operation]:
    ops: list[Operation] = []
    for edu in entries:
        logo = None
        if edu.logo:
            logo = el(
                "img", {"src": edu.logo, "alt": f"{edu.university} logo", "class": "edu-logo"}
            )

        item = el(
            "div",
            {"class": "education-item"},
            el(
                "div",
                {"class": "edu-header"},
                logo,
                el("div", {}, el("h3", {}, edu.university), el("p", {"class": "degree"}, edu.major)),
            ),
            el("p", {"class": "year"}, edu.year),
            el("p", {}, edu.description),
        )
        ops.append(Append(EDUCATION_LIST, item))
    return ops


def render_experience(entries: list[Experience]) -> list[Operation]:
    ops: list[Operation] = []
    for exp in entries:
        logo = None
        if exp.logo:
            logo = el(
                "img", {"src": exp.logo, "alt": f"{exp.company} logo", "class": "exp-logo"}
            )

        item = el(
            "div",
            {"class": "experience-item"},
            el(
                "div",
                {"class": "exp-header"},
                logo,
                el(
                    "div",
                    {},
                    el("h3", {}, exp.company),
                    el("p", {"class": "position"}, exp.position),
                ),
            ),
            el("p", {"class": "duration"}, exp.year),
            el("p", {}, exp.description),
        )
        ops.append(Append(EXPERIENCE_LIST, item))
    return ops


def _meta(icon_class: str, text: str | None) -> Element | None:
    if not text:
        return None
    return el("span", {}, icon(icon_class), f" {text}")


def render_projects(entries: list[Project]) -> list[Operation]:
    ops: list[Operation] = []
    for project in entries:
        link = None
        if project.link:
            link = el(
                "a",
                {"href": project.link, "class": "project-link", "target": "_blank"},
                "View Project ",
                icon("fas fa-external-link-alt"),
            )

        card = el(
            "div",
            {"class": "project-card"},
            el(
                "div",
                {"class": "project-image"},
                el("img", {"src": project.image, "alt": project.title}),
            ),
            el(
                "div",
                {"class": "project-info"},
                el("h3", {}, project.title),
                el(
                    "div",
                    {"class": "project-meta"},
                    el("span", {}, icon("fas fa-calendar-alt"), f" {project.year}"),
                    _meta("fas fa-money-bill-wave", project.fund),
                    _meta("fas fa-users", project.partner),
                    _meta("fas fa-user-tie", project.role),
                ),
                el("p", {}, project.description),
                link,
            ),
        )
        ops.append(Append(PROJECTS_GRID, card))
    return ops


def render_year(year: int) -> list[Operation]:
    return [SetText(CURRENT_YEAR, str(year))]
