"""Models for the files generated by Typescript services."""

import json
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .constants import JSON_INDENT


class PackageManifest(BaseModel):
    """Structure of package.json.

    Unknown keys and explicit nulls are kept so that a file edited by
    hand survives a read/write cycle.
    """

    name: str | None = None
    description: str | None = None
    version: str | None = None
    main: str | None = None
    # npm also accepts the object forms of license and author
    license: str | dict[str, Any] | None = None
    dependencies: dict[str, Any] | None = None
    dev_dependencies: dict[str, Any] | None = Field(default=None, alias="devDependencies")
    scripts: dict[str, Any] | None = None
    author: str | dict[str, Any] | None = None

    class Config:
        """Pydantic configuration."""

        populate_by_name = True
        extra = "allow"


class CompilerOptions(BaseModel):
    """compilerOptions of tsconfig.json."""

    target: str | None = None
    module: str | None = None
    lib: list[str] | None = None
    source_map: bool | None = None
    out_dir: str | None = None
    module_resolution: str | None = None
    declaration: bool | None = None
    remove_comments: bool | None = None
    no_implicit_any: bool | None = None
    strict_null_checks: bool | None = None
    strict_function_types: bool | None = None
    no_implicit_this: bool | None = None
    no_unused_locals: bool | None = None
    no_unused_parameters: bool | None = None
    no_implicit_returns: bool | None = None
    no_fallthrough_cases_in_switch: bool | None = None
    allow_synthetic_default_imports: bool | None = None
    emit_decorator_metadata: bool | None = None
    experimental_decorators: bool | None = None
    allow_js: bool | None = None
    incremental: bool | None = None
    base_url: str | None = None

    class Config:
        """Pydantic configuration."""

        alias_generator = to_camel
        populate_by_name = True


class TSConfig(BaseModel):
    """Structure of tsconfig.json and its variants."""

    extends: str | None = None
    compiler_options: CompilerOptions | None = Field(default=None, alias="compilerOptions")
    include: list[str] | None = None
    exclude: list[str] | None = None

    class Config:
        """Pydantic configuration."""

        populate_by_name = True


class ESLintConfig(BaseModel):
    """Structure of .eslintrc.json."""

    env: dict[str, bool] = Field(default_factory=dict)
    extends: list[str] = Field(default_factory=list)
    parser: str | None = None
    parser_options: dict[str, Any] = Field(default_factory=dict, alias="parserOptions")
    plugins: list[str] = Field(default_factory=list)
    rules: dict[str, Any] = Field(default_factory=dict)

    class Config:
        """Pydantic configuration."""

        populate_by_name = True


def to_json(model: BaseModel) -> str:
    """Serialize a model the way the generated files are written.

    Keys use their file aliases and only fields that were set, on
    construction, assignment or when read from disk, are written. The
    output is indented with 4 spaces.

    Args:
        model: Model to serialize.

    Returns:
        JSON text ending with a newline.
    """
    data = model.model_dump(by_alias=True, exclude_unset=True)
    return json.dumps(data, indent=JSON_INDENT) + "\n"
