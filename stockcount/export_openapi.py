# stockcount/export_openapi.py
import argparse
import json
from typing import Optional, Sequence

from stockcount.core.config import AppSettings


def build_schema() -> dict:
    from stockcount.main import create_app

    # metrics off: /metrics is not part of the public contract
    app = create_app(AppSettings(METRICS_ENABLED=False))
    return app.openapi()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Print the OpenAPI document as JSON.")
    parser.add_argument("-o", "--output", help="write to this file instead of stdout")
    args = parser.parse_args(argv)

    text = json.dumps(build_schema(), ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        print(text)


if __name__ == "__main__":
    main()
