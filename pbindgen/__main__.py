import argparse
import logging
import os
import sys
import typing

import yaml

import pbindgen.pipeline
import pbindgen.snapshot


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load output defaults from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		logger.warning(f"Config file {config_path} is not a mapping. Using defaults.")
		return {}

	return config


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Read a snapshot file and print its Pbind program.
	"""

	parser = argparse.ArgumentParser(prog="pbindgen", description="Render a point snapshot as a SuperCollider Pbind.")
	parser.add_argument("snapshot", help="YAML or JSON snapshot with settings, points and output options")
	parser.add_argument("--config", default="config.yaml", help="YAML file with default output options")
	parser.add_argument("--instrument", help="Synth name (overrides the snapshot)")
	parser.add_argument("--loop-count", type=int, help="Pseq repeat count (default: inf)")
	parser.add_argument("--no-compress", action="store_true", help="Do not collapse repeated tokens with Pn")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details")

	args = parser.parse_args(argv)

	if args.verbose:
		logging.getLogger().setLevel(logging.DEBUG)

	config = load_config(args.config)

	try:
		data = dict(pbindgen.snapshot.load_snapshot_data(args.snapshot))
	except (OSError, yaml.YAMLError, ValueError) as exc:
		logger.error(f"Could not read snapshot {args.snapshot}: {exc}")
		return 1

	# Snapshot options win over config defaults; command line wins over both.
	try:
		output = dict(pbindgen.snapshot.as_mapping(config.get('output'), "config output"))
		output.update(pbindgen.snapshot.as_mapping(data.get('output'), "output"))
	except ValueError as exc:
		logger.error(f"Invalid snapshot: {exc}")
		return 1

	if args.instrument is not None:
		output['instrument'] = args.instrument

	if args.loop_count is not None:
		output['loop_count'] = args.loop_count

	if args.no_compress:
		output['compress'] = False

	data['output'] = output

	try:
		snapshot = pbindgen.snapshot.snapshot_from_dict(data)
	except ValueError as exc:
		logger.error(f"Invalid snapshot: {exc}")
		return 1

	result = pbindgen.pipeline.build_snapshot(snapshot)

	logger.info(f"Built {result.chunk_count} chunks over {snapshot.settings.bars} bar(s)")

	print(result.program)

	return 0


if __name__ == "__main__":
	sys.exit(main())
