"""JSON output for resolved configs.

Generates the JSON envelope the CLI prints after resolving a config.
"""

import json
from typing import Any, Optional


class JsonReporter:
    """Generates JSON reports of a resolved config."""

    def generate(self, parsed: Any) -> dict[str, Any]:
        """Generate a report of a config resolution.

        Args:
            parsed: ParsedConfig returned by parse_config.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        return {
            "config": parsed.config.to_dict(),
            "groups": [g.to_dict() for g in parsed.group_configs],
        }

    def to_json_string(self, output: dict[str, Any], pretty: bool = False) -> str:
        """Convert output to a JSON string.

        Args:
            output: Output dictionary.
            pretty: If True, format with indentation.

        Returns:
            JSON string.
        """
        if pretty:
            return json.dumps(output, indent=2, ensure_ascii=False)
        return json.dumps(output, ensure_ascii=False)

    def generate_output(
        self,
        report: Optional[dict[str, Any]],
        message: str,
        success: bool = True,
    ) -> dict[str, Any]:
        """Wrap a report in the CLI output envelope.

        The envelope is:
        {
            "success": bool,
            "command": "config",
            "data": { ... } or null,
            "message": str
        }
        """
        return {
            "success": success,
            "command": "config",
            "data": report,
            "message": message,
        }

    def summarize(self, report: dict[str, Any]) -> str:
        """One-line summary of a report, used as the output message."""
        config = report["config"]
        groups = report["groups"]
        browsers = ", ".join(str(b) for b in config["browsers"] or [])
        message = f"Resolved config on port {config['port']} with browsers: {browsers}"
        if groups:
            message += f" ({len(groups)} group(s): {', '.join(g['name'] for g in groups)})"
        return message
