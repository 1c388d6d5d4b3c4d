"""JSON composition export/import."""

from __future__ import annotations

import json

from alloycomp.core.composition import Composition
from alloycomp.core.serializers import composition_to_dict, dict_to_composition


class JsonExporter:
    """JSON composition file operations."""

    def export_composition(
        self, composition: Composition, output_path: str,
    ) -> None:
        """Write composition as formatted JSON file.

        Args:
            composition: The composition to export.
            output_path: Destination file path (.json).
        """
        data = composition_to_dict(composition)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def import_composition(self, input_path: str) -> Composition:
        """Read composition from JSON file.

        Args:
            input_path: Source file path (.json).

        Returns:
            Reconstructed Composition.
        """
        with open(input_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return dict_to_composition(data)
