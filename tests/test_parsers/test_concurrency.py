from concurrent.futures import ThreadPoolExecutor

from seiargs.parser import Field, Record, SchemaParser


def test_shared_parser_across_threads():
    parser = SchemaParser(
        Record(
            positional=[Field("n", int)],
            named=[Field("verbose", bool, default=False, short="v")],
        )
    )

    def run(number: int) -> tuple[int, bool]:
        args = [str(number), "-v"] if number % 2 else [str(number)]
        result = parser.parse(args)
        return result.positional.n, result.named.verbose

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(run, range(200)))

    assert results == [(number, bool(number % 2)) for number in range(200)]
