# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loader for schemas declared in YAML or TOML files.

A schema document is a mapping describing one schema node:

- a node with a `subcommands` table is a `Subcommands` schema,
- a node with a `kind` key is a `Leaf` schema,
- any other node is a `Record` with optional `positional` and `named` lists.

Example (YAML):
    subcommands:
      hi:
        positional:
          - {name: val, kind: u8}
        named:
          - {name: other, kind: bool, default: false, short: o}
      bye:
        kind: u8
        default: 3
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from seiargs.exceptions import ParseError, SchemaError
from seiargs.logger import logger
from seiargs.parser import field as schema_field
from seiargs.parser.schema import Leaf, Record, Schema, Subcommands
from seiargs.parser.values import ParseFn, i8, i16, i32, i64, u8, u16, u32, u64

MAX_DEPTH = 16

KINDS: dict[str, Any] = {
    "int": int,
    "i8": i8,
    "i16": i16,
    "i32": i32,
    "i64": i64,
    "u8": u8,
    "u16": u16,
    "u32": u32,
    "u64": u64,
    "float": float,
    "str": str,
    "bool": bool,
}


def import_parser(dotted_path: str) -> ParseFn:
    """Dynamically imports a parser callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise SchemaError(f"Invalid parser path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise SchemaError(f"Could not import '{dotted_path}': {error}") from error
    try:
        parser = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise SchemaError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(parser):
        raise SchemaError(f"Parser '{dotted_path}' is not callable")
    return parser


class RawValue(BaseModel):
    """Kind, choices and parser shared by fields and leaves."""

    model_config = ConfigDict(extra="forbid")

    kind: str = "str"
    choices: list[str] | None = None
    parser: str | None = None
    description: str = ""
    default: Any = None

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: str) -> str:
        if value != "enum" and value not in KINDS:
            valid = ", ".join([*KINDS, "enum"])
            raise ValueError(f"Unknown kind '{value}'. Must be one of: {valid}")
        return value

    @model_validator(mode="after")
    def validate_choices(self) -> RawValue:
        if self.kind == "enum" and not self.choices:
            raise ValueError("kind 'enum' requires a non-empty 'choices' list")
        if self.kind != "enum" and self.choices is not None:
            raise ValueError("'choices' is only allowed with kind 'enum'")
        return self

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    def resolve_kind(self) -> Any:
        if self.kind == "enum":
            return Literal[tuple(self.choices or ())]
        return KINDS[self.kind]

    def resolve_parser(self) -> ParseFn | None:
        return import_parser(self.parser) if self.parser else None

    def resolve_default(self, kind: Any, parser: ParseFn | None, owner: str) -> Any:
        """
        Return the declared default as a value of `kind`.

        String defaults of non-string kinds, and of fields with a custom parser,
        are run through the parser as if they had been typed on the command line.

        Raises:
            SchemaError: If the default cannot be converted.
        """
        if not self.has_default:
            return schema_field.MISSING
        value = self.default
        if isinstance(value, str) and (parser is not None or self.kind != "str"):
            convert = schema_field.resolve_parser(kind, parser, owner)
            try:
                return convert(value)
            except (ParseError, ValueError) as error:
                raise SchemaError(
                    f"Invalid default {value!r} for {owner}: {error}"
                ) from error
        if self.kind == "float" and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return value


class RawField(RawValue):
    """One named or positional field."""

    name: str
    short: str | None = None

    def to_field(self) -> schema_field.Field:
        kind = self.resolve_kind()
        parser = self.resolve_parser()
        return schema_field.Field(
            name=self.name,
            kind=kind,
            parser=parser,
            default=self.resolve_default(kind, parser, f"field '{self.name}'"),
            short=self.short,
            description=self.description,
        )


class RawRecord(BaseModel):
    """A record node."""

    model_config = ConfigDict(extra="forbid")

    positional: list[RawField] = Field(default_factory=list)
    named: list[RawField] = Field(default_factory=list)
    description: str = ""

    def to_record(self) -> Record:
        return Record(
            positional=[raw.to_field() for raw in self.positional],
            named=[raw.to_field() for raw in self.named],
            description=self.description,
        )


class RawSubcommands(BaseModel):
    """A subcommand node; variants stay raw until converted recursively."""

    model_config = ConfigDict(extra="forbid")

    subcommands: dict[str, dict[str, Any]]
    description: str = ""


def schema_from_dict(data: dict[str, Any], _depth: int = 0, _variant: bool = False) -> Schema:
    """
    Build a schema from an already-loaded mapping.

    Raises:
        ValueError: If the nesting is too deep or a node is not a mapping.
        pydantic.ValidationError: If a node has the wrong structure.
        SchemaError: If the resulting schema violates an invariant.
    """
    if _depth > MAX_DEPTH:
        raise ValueError(f"Maximum subcommand depth exceeded ({MAX_DEPTH} levels deep)")
    if not isinstance(data, dict):
        raise ValueError(f"Schema nodes must be mappings, got {type(data).__name__}")

    if "subcommands" in data:
        raw = RawSubcommands(**data)
        variants: dict[str, Schema] = {}
        defaults: dict[str, Any] = {}
        for name, child in raw.subcommands.items():
            variants[name] = schema_from_dict(child, _depth + 1, _variant=True)
            if "kind" in child and "default" in child:
                raw_leaf = RawValue(**child)
                defaults[name] = raw_leaf.resolve_default(
                    raw_leaf.resolve_kind(),
                    raw_leaf.resolve_parser(),
                    f"subcommand '{name}'",
                )
        return Subcommands(variants, defaults, description=raw.description)

    if "kind" in data:
        raw_leaf = RawValue(**data)
        if raw_leaf.has_default and not _variant:
            raise SchemaError("A leaf default is only allowed on a subcommand variant")
        return Leaf(
            kind=raw_leaf.resolve_kind(),
            parser=raw_leaf.resolve_parser(),
            description=raw_leaf.description,
        )

    return RawRecord(**data).to_record()


def load_schema(file_path: Path | str) -> Schema:
    """
    Load a schema from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the schema file (.yaml, .yml or .toml).

    Returns:
        Schema: The `Record`, `Subcommands` or `Leaf` described by the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the document is not a mapping.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as schema_file:
        if suffix in (".yaml", ".yml"):
            raw_schema = yaml.safe_load(schema_file)
        elif suffix == ".toml":
            raw_schema = toml.load(schema_file)
        else:
            raise ValueError(f"Unsupported schema format: {suffix}")

    if not isinstance(raw_schema, dict):
        raise ValueError(
            "Schema file must contain a mapping.\n"
            "Example:\n"
            "positional:\n"
            "  - name: path\n"
            "named:\n"
            "  - {name: verbose, kind: bool, default: false, short: v}"
        )

    logger.debug("Loading schema from %s", path)
    return schema_from_dict(raw_schema)
