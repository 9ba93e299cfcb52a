# export_traces.py
import argparse
import datetime
import json
import logging
from pathlib import Path

from tqdm import tqdm

from ds_lab.dispatcher import simulate
from ds_lab.registry import PRESETS, list_structures, preset_values
from ds_lab.web.inputs import field_default

logger = logging.getLogger(__name__)


def build_jobs():
    """Every (structure, operation, preset) combination, with the playground's default field values."""
    jobs = []
    for structure in list_structures():
        for operation in structure.operations:
            params = {f.id: field_default(f.id, operation) for f in operation.fields}
            for preset in PRESETS:
                jobs.append({
                    "structure_id": structure.id,
                    "operation_id": operation.id,
                    "preset": preset["id"],
                    "initial_values": preset_values(preset, structure),
                    "params": params,
                })
    return jobs


def export_all(output_dir):
    """Run every job and write one trace file per run; returns the written paths."""
    output_dir = Path(output_dir)
    written = []
    for job in tqdm(build_jobs(), desc="Exporting traces"):
        trace = simulate(job["structure_id"], job["operation_id"], job["initial_values"], job["params"])
        target_dir = output_dir / job["structure_id"]
        target_dir.mkdir(parents=True, exist_ok=True)
        output_path = target_dir / f"{job['operation_id']}_{job['preset']}_trace.json"
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(trace, f, indent=2, ensure_ascii=False)
        written.append(output_path)
    logger.info("Wrote %d trace file(s) to %s", len(written), output_dir)
    return written


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Export traces for every registry operation and preset')
    parser.add_argument("--output_dir", default="traces", help="Directory for the exported JSON files")
    args = parser.parse_args()

    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )
    logging.info(f"Export started: {timestamp}")
    logging.info(f"Args: {vars(args)}")
    export_all(args.output_dir)
