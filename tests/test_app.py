"""Tests for starting the page: rendering into the shell and wiring events."""

from datetime import date

import pytest

from conftest import PROFILE, PROJECTS, write_documents
from folio.shared import LoadFailure, MissingContainerError, TemplateNotFoundError
from folio.site import DataSources, Page, SectionBox, start
from folio.site.nodes import Append, SetText, el
from folio.site.renderers import CONTAINER_IDS


SECTIONS = [
    SectionBox("about", 0, 900),
    SectionBox("education", 900, 600),
    SectionBox("experience", 1500, 600),
    SectionBox("projects", 2100, 900),
    SectionBox("contact", 3000, 600),
]


def child_tags(page, element_id):
    return [c for c in page.get(element_id).children if getattr(c, "name", None)]


def active_links(page):
    return [a["href"] for a in page.nav_links() if "active" in page.classes(a)]


def test_default_shell_has_every_container():
    """Test the bundled shell carries the whole id contract."""
    page = Page.default()
    assert page.missing(CONTAINER_IDS) == []
    assert page.section_ids() == ["about", "education", "experience", "projects", "contact"]
    assert page.nav_hrefs() == ["#about", "#education", "#experience", "#projects", "#contact"]


def test_start_renders_every_record(data_dir):
    """Test a successful start fills every container in document order."""
    page = Page.default()
    app = start(page, DataSources(data_dir))

    assert app.result.ok
    assert page.text("profile-name") == "Ada Lovelace"
    assert page.text("profile-email") == "ada@example.com"
    assert page.get("profile-pic")["alt"] == "Ada Lovelace's profile picture"

    assert len(child_tags(page, "skills-grid")) == 2
    education = child_tags(page, "education-list")
    assert [e.h3.get_text() for e in education] == ["University of London", "Home Tutoring"]
    assert len(child_tags(page, "experience-list")) == 2
    projects = child_tags(page, "projects-grid")
    assert [p.h3.get_text() for p in projects] == ["Note G", "Poetical Science"]
    assert projects[1].find("a") is None


def test_footer_year_is_current_year(data_dir):
    """Test the footer shows the calendar year at load time."""
    page = Page.default()
    start(page, DataSources(data_dir))
    assert page.text("current-year") == str(date.today().year)


def test_cv_link_ends_up_after_social_links(data_dir):
    """Test the CV download link moves to the end of the social links."""
    page = Page.default()
    start(page, DataSources(data_dir))

    social = child_tags(page, "social-links")
    assert len(social) == 3
    cv = social[-1]
    assert cv["id"] == "cv-download"
    assert cv["href"] == "files/cv.pdf"
    assert cv.has_attr("download")
    assert cv.i["class"] in ("fas fa-file-pdf", ["fas", "fa-file-pdf"])
    assert page.soup.find_all(id="cv-download") == [cv]


def test_failed_load_renders_nothing(data_dir, capsys):
    """Test a single failing document leaves every container empty."""
    (data_dir / "projects.json").unlink()
    page = Page.default()

    app = start(page, DataSources(data_dir))

    assert not app.result.ok
    assert app.result.reason == LoadFailure.NOT_FOUND
    for element_id in ("skills-grid", "social-links", "education-list",
                       "experience-list", "projects-grid"):
        assert child_tags(page, element_id) == []
    assert page.text("profile-name") == ""
    assert page.text("current-year") == ""
    assert "Error loading data" in capsys.readouterr().out


def test_text_is_escaped_in_output(tmp_path):
    """Test record text is emitted as text, never as markup."""
    data_dir = write_documents(
        tmp_path / "data",
        experience=[{"company": "<script>alert(1)</script>", "position": "x"}],
    )
    page = Page.default()
    start(page, DataSources(data_dir))

    html = page.to_html()
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


def test_sections_start_hidden(data_dir):
    """Test every section gets the hidden reveal style on start."""
    page = Page.default()
    start(page, DataSources(data_dir))

    for section in page.sections():
        style = section["style"]
        assert "opacity: 0" in style
        assert "transform: translateY(20px)" in style
        assert "transition: all 0.6s ease-out" in style


def test_no_reveal_leaves_sections_untouched(data_dir):
    page = Page.default()
    start(page, DataSources(data_dir), reveal=False)
    assert all(not s.has_attr("style") for s in page.sections())


def test_scroll_marks_single_active_link(data_dir):
    """Test scrolling highlights the link of the section in view."""
    page = Page.default()
    app = start(page, DataSources(data_dir))

    app.scroll(1400, SECTIONS)
    assert active_links(page) == ["#experience"]

    app.scroll(1400, SECTIONS)
    assert active_links(page) == ["#experience"]

    app.scroll(0, SECTIONS)
    assert active_links(page) == ["#about"]


def test_click_requests_smooth_scroll(data_dir):
    page = Page.default()
    app = start(page, DataSources(data_dir))

    request = app.click("#projects", SECTIONS)

    assert request.top == 2100
    assert request.behavior == "smooth"


def test_intersection_reveals_once(data_dir):
    """Test the animate class is added on intersection and never removed."""
    page = Page.default()
    app = start(page, DataSources(data_dir))

    assert app.intersect([("education", 0.05)]) == set()
    assert "animate" not in page.classes(page.section("education"))

    assert app.intersect([("education", 0.4)]) == {"education"}
    assert app.intersect([("education", 0.0)]) == set()
    assert app.intersect([("education", 0.9)]) == set()

    assert page.classes(page.section("education")) == ["section", "animate"]


def test_apply_to_missing_container_raises():
    page = Page("<html><body><div id='other'></div></body></html>")
    with pytest.raises(MissingContainerError):
        page.apply([SetText("profile-name", "A")])


def test_apply_append_builds_tags():
    """Test an appended element tree becomes real tags."""
    page = Page("<div id='box'></div>")
    page.apply([Append("box", el("p", {"class": "year"}, "2024"))])
    assert str(page.get("box")) == '<div id="box"><p class="year">2024</p></div>'


def test_template_file(tmp_path):
    """Test a page loaded from a user template and a missing template."""
    shell = tmp_path / "shell.html"
    shell.write_text("<html><body><h1 id='profile-name'></h1></body></html>", encoding="utf-8")

    page = Page.from_file(shell)
    assert page.missing(["profile-name", "skills-grid"]) == ["skills-grid"]

    with pytest.raises(TemplateNotFoundError):
        Page.from_file(tmp_path / "absent.html")


def test_null_fields_still_render(tmp_path):
    """Test a null phone and a null project title render as empty text."""
    data_dir = write_documents(
        tmp_path / "data",
        profile={**PROFILE, "phone": None},
        projects=[{**PROJECTS[0], "title": None}, PROJECTS[1]],
    )
    page = Page.default()

    app = start(page, DataSources(data_dir))

    assert app.result.ok
    assert page.text("profile-phone") == ""
    assert page.text("profile-name") == "Ada Lovelace"
    projects = child_tags(page, "projects-grid")
    assert [p.h3.get_text() for p in projects] == ["", "Poetical Science"]
    assert projects[0].img["alt"] == ""
