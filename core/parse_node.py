"""Node.js package.json parsing."""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import (
    ManifestNotFoundError,
    ManifestParseError,
    ManifestReadError,
)
from .fs import FileAccess
from .models import Engines, PackageJson

PACKAGE_JSON = "package.json"

logger = logging.getLogger(__name__)


class EnginesDocument(BaseModel):
    """The ``engines`` object as it appears in package.json."""

    model_config = ConfigDict(extra="ignore")

    node: str | None = None


class PackageJsonDocument(BaseModel):
    """Wire shape of package.json. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    dependencies: dict[str, str] | None = None
    dev_dependencies: dict[str, str] | None = Field(None, alias="devDependencies")
    scripts: dict[str, str] | None = None
    engines: EnginesDocument | None = None
    main: str | None = None
    package_manager: str | None = Field(None, alias="packageManager")

    def to_package_json(self) -> PackageJson:
        engines = self.engines or EnginesDocument()
        return PackageJson(
            dependencies=self.dependencies,
            dev_dependencies=self.dev_dependencies,
            scripts=self.scripts,
            engines=Engines(node=engines.node or ""),
            main=self.main or "",
            package_manager=self.package_manager,
        )


def parse_package_json(content: str | bytes, path: str = PACKAGE_JSON) -> PackageJson:
    """Parse package.json content into PackageJson.

    Args:
        content: The package.json file content
        path: Name used in error messages

    Returns:
        Parsed, read-only PackageJson

    Raises:
        ManifestParseError: content is not valid JSON, is not an object, or
            a recognized key holds a value of the wrong type
    """
    try:
        document = PackageJsonDocument.model_validate_json(content)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise ManifestParseError(f"Invalid {path}: {detail}", path=path) from e

    return document.to_package_json()


def deserialize_package_json(fs: FileAccess, path: str = PACKAGE_JSON) -> PackageJson:
    """Read and parse the manifest through the given file access.

    Args:
        fs: File access the manifest is read from
        path: Manifest path relative to the file access root

    Returns:
        Parsed, read-only PackageJson

    Raises:
        ManifestNotFoundError: the manifest does not exist
        ManifestReadError: the manifest exists but could not be read
        ManifestParseError: the manifest is not a valid package.json document
    """
    try:
        content = fs.read_bytes(path)
    except FileNotFoundError as e:
        raise ManifestNotFoundError(f"{path} not found", path=path) from e
    except OSError as e:
        raise ManifestReadError(f"Cannot read {path}: {e}", path=path) from e

    logger.debug("Read %d bytes from %s", len(content), path)
    package_json = parse_package_json(content, path=path)
    logger.debug(
        "Parsed %s: %d dependencies, %d devDependencies, %d scripts",
        path,
        len(package_json.dependencies),
        len(package_json.dev_dependencies),
        len(package_json.scripts),
    )
    return package_json
