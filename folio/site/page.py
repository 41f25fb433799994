"""Page adapter: the one place the HTML document is mutated.

The shell is parsed with BeautifulSoup and elements are addressed by id,
the same contract the renderers write against. Renderer operations,
navigation state and reveal state are all applied through this class.
"""

from pathlib import Path
from typing import Iterable, Optional

from bs4 import BeautifulSoup, Tag
from jinja2 import Environment, FileSystemLoader

from folio.shared import MissingContainerError, TemplateNotFoundError
from folio.site.nodes import Append, Element, Move, Operation, SetAttrs, SetIcon, SetText


TEMPLATES_DIR = Path(__file__).parent / "templates"
SECTION_SELECTOR = ".section"
NAV_LINK_SELECTOR = ".sidebar-nav a"

env = Environment(loader=FileSystemLoader(TEMPLATES_DIR), autoescape=True)


def default_shell(title: str = "Portfolio") -> str:
    """Render the bundled page shell carrying every container id."""
    return env.get_template("index.html").render(title=title)


class Page:
    """Headless document model over a BeautifulSoup tree."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, "html.parser")

    @classmethod
    def from_file(cls, path: str | Path) -> "Page":
        path = Path(path)
        if not path.is_file():
            raise TemplateNotFoundError(str(path))
        return cls(path.read_text(encoding="utf-8"))

    @classmethod
    def default(cls) -> "Page":
        return cls(default_shell())

    def get(self, element_id: str) -> Tag:
        tag = self.soup.find(id=element_id)
        if tag is None:
            raise MissingContainerError(element_id)
        return tag

    def missing(self, element_ids: Iterable[str]) -> list[str]:
        return [i for i in element_ids if self.soup.find(id=i) is None]

    def build(self, element: Element) -> Tag:
        """Turn a declarative element into a soup tag."""
        tag = self.soup.new_tag(element.tag, attrs=dict(element.attrs))
        for child in element.children:
            if isinstance(child, Element):
                tag.append(self.build(child))
            else:
                tag.append(child)
        return tag

    def apply(self, ops: Iterable[Operation]) -> None:
        for op in ops:
            if isinstance(op, SetText):
                self.get(op.target).string = op.text
            elif isinstance(op, SetAttrs):
                tag = self.get(op.target)
                for name, value in op.attrs.items():
                    tag[name] = value
            elif isinstance(op, SetIcon):
                target = self.get(op.target)
                i = target.find("i")
                if i is None:
                    i = self.soup.new_tag("i")
                    target.append(i)
                i["class"] = op.icon_class
            elif isinstance(op, Append):
                self.get(op.target).append(self.build(op.element))
            elif isinstance(op, Move):
                self.get(op.target).append(self.get(op.source).extract())
            else:
                raise TypeError(f"Unknown page operation: {op!r}")

    def sections(self) -> list[Tag]:
        return self.soup.select(SECTION_SELECTOR)

    def section_ids(self) -> list[str]:
        return [s.get("id", "") for s in self.sections()]

    def nav_links(self) -> list[Tag]:
        return self.soup.select(NAV_LINK_SELECTOR)

    def nav_hrefs(self) -> list[str]:
        return [a.get("href", "") for a in self.nav_links()]

    def set_active_links(self, active: set[str]) -> None:
        for link in self.nav_links():
            self.remove_class(link, "active")
            if link.get("href", "") in active:
                self.add_class(link, "active")

    def section(self, section_id: str) -> Optional[Tag]:
        for s in self.sections():
            if s.get("id") == section_id:
                return s
        return None

    def set_style(self, tag: Tag, styles: dict[str, str]) -> None:
        declared = _parse_style(tag.get("style", ""))
        declared.update(styles)
        tag["style"] = "; ".join(f"{k}: {v}" for k, v in declared.items())

    @staticmethod
    def classes(tag: Tag) -> list[str]:
        value = tag.get("class") or []
        return value.split() if isinstance(value, str) else list(value)

    def add_class(self, tag: Tag, name: str) -> None:
        classes = self.classes(tag)
        if name not in classes:
            tag["class"] = classes + [name]

    def remove_class(self, tag: Tag, name: str) -> None:
        classes = [c for c in self.classes(tag) if c != name]
        if classes:
            tag["class"] = classes
        elif tag.has_attr("class"):
            del tag["class"]

    def text(self, element_id: str) -> str:
        return self.get(element_id).get_text()

    def to_html(self) -> str:
        return str(self.soup)

    def write(self, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_html(), encoding="utf-8")


def _parse_style(style: str) -> dict[str, str]:
    declared = {}
    for part in style.split(";"):
        if ":" in part:
            key, value = part.split(":", 1)
            declared[key.strip()] = value.strip()
    return declared
