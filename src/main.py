import sys
import logging
from typing import List, Optional

from config import EngineConfig
from errors import PaymentsError
from payments_engine import PaymentsEngine
from reader import get_file_path
from writer import write_accounts


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv

    try:
        config = EngineConfig.from_env()
        logging.basicConfig(
            level=config.log_level,
            format="%(levelname)s: %(message)s",
            stream=sys.stderr,
        )

        filepath = get_file_path(argv)
        engine = PaymentsEngine(config)
        accounts = engine.process_file(filepath)
    except PaymentsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_accounts(accounts, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
