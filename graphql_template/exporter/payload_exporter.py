"""Payload exporter."""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class PayloadExporter:
    """Write built payloads to disk."""

    def export(self, output_file: Union[str, Path], payload: str) -> Path:
        """Write the payload as UTF-8, exactly as built."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8", newline="") as f:
            f.write(payload)

        logger.info(f"Exported payload to {output_file}")
        return output_file
