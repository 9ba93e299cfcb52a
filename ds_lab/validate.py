# validate.py
import argparse
import json
import logging
from pathlib import Path

import jsonschema

from ds_lab.errors import TraceValidationError

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("trace_schema.json")
TRACE_SCHEMA = json.loads(SCHEMA_PATH.read_text(encoding='utf-8'))


def validate_trace(trace):
    """
    Check a trace against the trace schema, then check step ids are unique.
    Raises TraceValidationError with the failing path.
    """
    try:
        jsonschema.validate(instance=trace, schema=TRACE_SCHEMA)
    except jsonschema.exceptions.ValidationError as e:
        raise TraceValidationError(e.message, e.path) from e

    seen = set()
    for position, step in enumerate(trace["steps"]):
        if step["id"] in seen:
            raise TraceValidationError(f"Duplicate step id '{step['id']}'", ["steps", position, "id"])
        seen.add(step["id"])
    return trace


def validate_trace_file(json_path):
    """Validate one trace JSON file on disk; returns True on success and logs the reason on failure."""
    json_path = Path(json_path)
    try:
        data = json.loads(json_path.read_text(encoding='utf-8'))
        validate_trace(data)
    except TraceValidationError as e:
        logger.error("[Failed] %s: %s (path: %s)", json_path.name, e, e.path)
        return False
    except FileNotFoundError:
        logger.error("[Failed] File not found: %s", json_path)
        return False
    except json.JSONDecodeError:
        logger.error("[Failed] File content is not valid JSON: %s", json_path)
        return False

    logger.info("[Success] %s is a valid trace.", json_path.name)
    return True


def main(args):
    data_dir = Path(args.data_dir)
    all_files = sorted(data_dir.rglob("*.json"))
    if not all_files:
        logger.warning("No .json files found in directory '%s'.", data_dir)

    success_count = sum(1 for json_file in all_files if validate_trace_file(json_file))

    print("\n--- Validation Complete ---")
    print(f"Total: {len(all_files)} files, Success: {success_count}, Failed: {len(all_files) - success_count}.")
    return success_count == len(all_files)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    parser = argparse.ArgumentParser(description='Validate exported trace JSON files')
    parser.add_argument('data_dir', nargs='?', default='traces', help='Directory containing trace JSON files')
    ok = main(parser.parse_args())
    raise SystemExit(0 if ok else 1)
