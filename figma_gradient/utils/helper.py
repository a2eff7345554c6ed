import json
import os
from typing import Any

from log_utils import logs, setup_logger

logger = setup_logger(__name__)


class HelpUtils:
    @staticmethod
    def json_load(filename: str) -> Any:
        with open(filename, encoding="utf-8") as infile:
            return json.load(infile)

    @staticmethod
    def json_dump(obj, filename: str):
        with open(filename, "w", encoding="utf-8") as outfile:
            json.dump(obj, outfile, ensure_ascii=False, indent=4)

    @staticmethod
    def unwrap_node(data: Any, node_id: str | None = None) -> dict[str, Any]:
        """
        Accepts a bare node dict or a saved nodes endpoint response
        ({'nodes': {id: {'document': node}}}) and returns the node.
        """
        if not isinstance(data, dict):
            raise ValueError("Node JSON must be an object")

        nodes = data.get("nodes")
        if not isinstance(nodes, dict):
            return data

        if node_id is None:
            if not nodes:
                raise ValueError("Nodes response is empty")
            node_id = next(iter(nodes))
        entry = nodes.get(node_id)
        if not isinstance(entry, dict) or not isinstance(entry.get("document"), dict):
            raise ValueError(f"Node {node_id} not found in nodes response")
        return entry["document"]

    @staticmethod
    @logs(logger, on=True)
    def save_result(node_id: str | None, css: str, output_file: str) -> str:
        """Save converted gradient to a JSON file"""
        output_dir = os.path.dirname(output_file)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        HelpUtils.json_dump({"node": node_id, "css": css}, output_file)
        logger.info(f"Result saved: {output_file}")
        return output_file
