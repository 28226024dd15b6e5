"""Reporting service for generating JSON and YAML outputs."""

import json

from revaddr.models.conversion import ConversionReport


class Reporter:
    """Generates formatted conversion reports.

    Provides static methods for generating JSON and YAML reports.
    """

    @staticmethod
    def generate_json_report(report: ConversionReport) -> str:
        """Generate JSON-formatted conversion report.

        Args:
            report: ConversionReport with per-input results.

        Returns:
            str: Pretty-printed JSON string with sorted keys for determinism.

        Example:
            >>> print(Reporter.generate_json_report(report))
            {
              "results": [...],
              "summary": {...}
            }
        """
        return json.dumps(report.to_json(), indent=2, sort_keys=True)

    @staticmethod
    def generate_yaml_report(report: ConversionReport) -> str:
        """Generate YAML-formatted conversion report.

        Args:
            report: ConversionReport with per-input results.

        Returns:
            str: YAML string with header comments.
        """
        return report.to_yaml()

    @staticmethod
    def generate_report(report: ConversionReport, output_format: str) -> str:
        """Generate a report in the configured format ("json" or "yaml").

        Raises:
            ValueError: If output_format is not supported.
        """
        if output_format == "json":
            return Reporter.generate_json_report(report)
        elif output_format == "yaml":
            return Reporter.generate_yaml_report(report)

        raise ValueError(f"Unsupported output format: {output_format}")
