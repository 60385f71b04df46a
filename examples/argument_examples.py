import sys
from enum import Enum
from pathlib import Path

from rich.pretty import pprint

from seiargs import Field, Leaf, ParseError, Record, Subcommands, parse_with_remaining
from seiargs.parser import u8, u16


class Place(Enum):
    """Enum for different places."""

    NEW_YORK = "New York"
    SAN_FRANCISCO = "San Francisco"
    LONDON = "London"


def existing_path(value: str) -> Path:
    path = Path(value)
    if not path.exists():
        raise ValueError(f"{value} does not exist")
    return path


deploy = Record(
    positional=[
        Field("service", str, description="Service name to deploy."),
        Field("place", Place, default=Place.NEW_YORK, description="Where to deploy."),
    ],
    named=[
        Field("region", str, default="us-east-1", short="r"),
        Field("path", Path, parser=existing_path, default=None, short="p"),
        Field("replicas", u16, default=1, short="n"),
        Field("verbose", bool, default=False, short="v"),
        Field("dry-run", bool, default=False, short="d"),
    ],
)

schema = Subcommands(
    {
        "deploy": deploy,
        "rollback": Leaf(u8, description="Number of releases to roll back."),
    },
    defaults={"rollback": 1},
)


if __name__ == "__main__":
    try:
        result, rest = parse_with_remaining(schema, sys.argv[1:])
    except ParseError as error:
        print(f"{error.kind}: {error}", file=sys.stderr)
        sys.exit(2)
    pprint(result)
    if rest:
        pprint(rest)
