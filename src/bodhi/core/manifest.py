import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError

MANIFEST_FILE = "bodhi.toml"

DEFAULT_MANIFEST = """\
[project]
name = "{name}"

[tokens]
rupa = "bodhi.rupa.json"
output = "bodhi-tokens.css"
"""


@dataclass
class TokensConfig:
    """Token compile configuration."""

    rupa: str = "bodhi.rupa.json"
    output: str = "bodhi-tokens.css"


@dataclass
class BodhiManifest:
    """Project configuration from bodhi.toml.

    Relative paths are resolved against ``root``, the manifest's directory.
    """

    name: str = "bodhi-project"
    root: Path = field(default_factory=Path.cwd)
    tokens: TokensConfig = field(default_factory=TokensConfig)

    @property
    def rupa_path(self) -> Path:
        return self.root / self.tokens.rupa

    @property
    def output_path(self) -> Path:
        return self.root / self.tokens.output


def find_manifest(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` looking for bodhi.toml."""
    start = (start or Path.cwd()).resolve()
    for directory in [start, *start.parents]:
        candidate = directory / MANIFEST_FILE
        if candidate.is_file():
            return candidate
    return None


def load_manifest(path: Path) -> BodhiManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    project = data.get("project", {})
    tokens_data = data.get("tokens", {})
    if not isinstance(project, dict) or not isinstance(tokens_data, dict):
        raise ManifestError(f"{path}: [project] and [tokens] must be tables")

    tokens = TokensConfig(
        rupa=str(tokens_data.get("rupa", "bodhi.rupa.json")),
        output=str(tokens_data.get("output", "bodhi-tokens.css")),
    )
    return BodhiManifest(
        name=str(project.get("name", "bodhi-project")),
        root=path.resolve().parent,
        tokens=tokens,
    )


def load_project_manifest(start: Path | None = None) -> BodhiManifest:
    """Load the nearest bodhi.toml, or defaults rooted at ``start`` when none exists."""
    path = find_manifest(start)
    if path is None:
        return BodhiManifest(root=(start or Path.cwd()).resolve())
    return load_manifest(path)
