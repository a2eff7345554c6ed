import argparse
import sys

import requests

import configuration as config
from log_utils import setup_logger

from .base import FigmaSession
from .converter import LinearGradientConverter
from .errors import DegenerateLinesError, InvalidGradientError
from .figma_extractor import FigmaGradientExtractor
from .utils.helper import HelpUtils

logger = setup_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.input and not args.node_id:
        print("Please provide --input with a node JSON file, or --node-id to fetch the node from Figma")
        show_usage_help()
        return 1

    file_id, token = get_credentials(args)
    if args.node_id and not args.input and (not file_id or not token):
        print("Please provide --file-id and --token, or set FIGMA_FILE_ID and FIGMA_TOKEN in environment")
        return 1

    extractor = FigmaGradientExtractor(FigmaSession(file_id=file_id or "", token=token or ""), LinearGradientConverter())

    try:
        css = process_request(args, extractor)
    except (DegenerateLinesError, InvalidGradientError, ValueError) as e:
        logger.error(f"Cannot convert gradient: {e}")
        return 1
    except requests.exceptions.RequestException as e:
        logger.error(f"Figma request failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read node file {args.input}: {e}")
        return 1

    print(css)
    if args.output:
        try:
            HelpUtils.save_result(args.node_id, css, args.output)
        except OSError as e:
            logger.error(f"Cannot save result to {args.output}: {e}")
            return 1
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    parser = argparse.ArgumentParser(description="Figma linear gradient to CSS linear-gradient()")

    # Source
    parser.add_argument("--input", required=False, help="Node JSON file (plugin dump or nodes endpoint response)")
    parser.add_argument("--node-id", required=False, help="Figma node id, fetched through the REST API unless --input is given")

    # Credentials
    parser.add_argument("--file-id", required=False, help="Figma file ID (optional if set in environment)")
    parser.add_argument("--token", required=False, help="Figma API token (optional if set in environment)")

    # Processing options
    parser.add_argument(
        "--apply-rotation",
        action="store_true",
        help="Lay the gradient line out on the rotated node. The CSS angle and stops stay relative to the node's own box",
    )
    parser.add_argument("--output", required=False, help="Save {'node', 'css'} JSON to this file")

    return parser


def get_credentials(args) -> tuple[str | None, str | None]:
    """Get Figma credentials from arguments or environment"""
    file_id = args.file_id or config.figma_settings.FIGMA_FILE_ID
    token = args.token or config.figma_settings.FIGMA_TOKEN
    return file_id, token


def process_request(args, extractor: FigmaGradientExtractor) -> str:
    """Convert the node from the file or from the Figma API"""
    ignore_rotation = not args.apply_rotation

    if args.input:
        logger.info(f"Converting node from file: {args.input}")
        node = HelpUtils.unwrap_node(HelpUtils.json_load(args.input), args.node_id)
        return extractor.convert(node, ignore_rotation)

    logger.info(f"Converting node {args.node_id} from Figma file {extractor.session.file_id}")
    return extractor.convert_node(args.node_id, ignore_rotation)


def show_usage_help() -> None:
    """Show usage help"""
    print("Examples:")
    print("  python -m figma_gradient.cli --input node.json")
    print("  python -m figma_gradient.cli --file-id ID --token TOKEN --node-id 12:34")
    print("  python -m figma_gradient.cli --input node.json --apply-rotation --output result.json")


if __name__ == "__main__":
    sys.exit(main())
