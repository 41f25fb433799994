"""Concurrent loading of the four portfolio data documents.

Documents live under a data root that is either a local directory or an
http(s) base URL. All four are fetched at once and joined all-or-nothing:
a single failure fails the whole load and nothing is rendered.
"""

import asyncio
import http.client
import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ValidationError

from folio.shared import Color, DataLoadError, LoadFailure, UnsupportedFormatError, echo
from folio.site.models import (
    Education,
    EducationList,
    Experience,
    ExperienceList,
    Profile,
    Project,
    ProjectList,
)


DATA_FILES = {
    "profile": "profile.json",
    "education": "education.json",
    "experience": "experience.json",
    "projects": "projects.json",
}

DOCUMENT_MODELS: dict[str, type[BaseModel]] = {
    "profile": Profile,
    "education": EducationList,
    "experience": ExperienceList,
    "projects": ProjectList,
}

YAML_SUFFIXES = (".yaml", ".yml")


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


class DataSources:
    """Resolves the location of each document under a data root."""

    def __init__(self, root: str | Path, timeout: Optional[float] = None):
        self.root = str(root)
        self.timeout = timeout

    def locate(self, name: str) -> str:
        file_name = DATA_FILES[name]
        if is_url(self.root):
            return f"{self.root.rstrip('/')}/{file_name}"

        path = Path(self.root) / file_name
        if not path.exists():
            for suffix in YAML_SUFFIXES:
                candidate = path.with_suffix(suffix)
                if candidate.exists():
                    return str(candidate)
        return str(path)

    def locations(self) -> dict[str, str]:
        return {name: self.locate(name) for name in DATA_FILES}


@dataclass
class Portfolio:
    """The four parsed documents."""

    profile: Profile
    education: list[Education]
    experience: list[Experience]
    projects: list[Project]


@dataclass
class LoadResult:
    """Outcome of a load: the portfolio, or why it could not be built."""

    ok: bool
    portfolio: Optional[Portfolio] = None
    reason: Optional[LoadFailure] = None
    document: Optional[str] = None
    message: str = ""

    @classmethod
    def success(cls, portfolio: Portfolio) -> "LoadResult":
        return cls(ok=True, portfolio=portfolio)

    @classmethod
    def failure(cls, error: DataLoadError) -> "LoadResult":
        return cls(
            ok=False,
            reason=error.reason,
            document=error.document,
            message=str(error),
        )


def _read_bytes(name: str, location: str, timeout: Optional[float]) -> bytes:
    if is_url(location):
        req = urllib.request.Request(location, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(req, timeout=timeout) as response:
                return response.read()
        except urllib.error.HTTPError as e:
            raise DataLoadError(name, LoadFailure.HTTP_STATUS, f"{e.code} {e.reason}") from e
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise DataLoadError(name, LoadFailure.NETWORK, str(e)) from e

    path = Path(location)
    if not path.is_file():
        raise DataLoadError(name, LoadFailure.NOT_FOUND, f"No such file: {location}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise DataLoadError(name, LoadFailure.NOT_FOUND, str(e)) from e


def parse_document(name: str, location: str, raw: bytes) -> Any:
    """Decode raw document bytes as JSON or YAML depending on the suffix."""
    suffix = Path(location.split("?", 1)[0]).suffix.lower()

    try:
        if suffix == ".json":
            return json.loads(raw)
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(raw)
    except json.JSONDecodeError as e:
        raise DataLoadError(name, LoadFailure.PARSE, f"Invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise DataLoadError(name, LoadFailure.PARSE, f"Invalid YAML: {e}") from e
    except UnicodeDecodeError as e:
        raise DataLoadError(name, LoadFailure.PARSE, str(e)) from e

    raise DataLoadError(name, LoadFailure.PARSE, str(UnsupportedFormatError(location)))


def validate_document(name: str, data: Any) -> BaseModel:
    try:
        return DOCUMENT_MODELS[name].model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{' -> '.join(str(x) for x in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        )
        raise DataLoadError(name, LoadFailure.INVALID, problems) from e


def fetch_document(name: str, location: str, timeout: Optional[float] = None) -> BaseModel:
    """Read, decode and validate one document. Blocking."""
    raw = _read_bytes(name, location, timeout)
    return validate_document(name, parse_document(name, location, raw))


async def load_portfolio(
    sources: DataSources, verbose: bool = False, report: bool = True
) -> LoadResult:
    """Fetch all four documents concurrently and join them.

    Failures are returned as a failed ``LoadResult`` and never raised to
    the caller. They are also echoed to the console unless ``report`` is off.
    """
    loop = asyncio.get_running_loop()
    locations = sources.locations()

    def fetch(name: str):
        if verbose:
            echo(f"  Fetching {name}: {locations[name]}", Color.INFO)
        return loop.run_in_executor(
            None, fetch_document, name, locations[name], sources.timeout
        )

    try:
        profile, education, experience, projects = await asyncio.gather(
            *(fetch(name) for name in DATA_FILES)
        )
    except DataLoadError as e:
        if report:
            echo(f"Error loading data: {e}", Color.ERROR)
        return LoadResult.failure(e)

    return LoadResult.success(
        Portfolio(
            profile=profile,
            education=education.root,
            experience=experience.root,
            projects=projects.root,
        )
    )
