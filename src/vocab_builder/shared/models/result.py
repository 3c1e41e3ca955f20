"""
Result record of one generation run.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .terms import TermTable


@dataclass
class GenerationResult:
    """
    Outcome of rendering a term table for one target.

    Attributes:
        target: Target language tag.
        class_name: Name of the generated class/module.
        source: Generated source text.
        table: The term table that was rendered.
        identifiers: Every identifier emitted, in emission order.
        output_path: File the source was written to, if any.
    """
    target: str
    class_name: str
    source: str
    table: TermTable
    identifiers: List[str] = field(default_factory=list)
    output_path: Optional[Path] = None

    def get_summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            "Generation Summary:",
            f"  Target: {self.target}",
            f"  Class: {self.class_name}",
            f"  Namespace: {self.table.vocabulary.namespace}",
            f"  Terms: {len(self.table)}",
            f"  Identifiers: {len(self.identifiers)}",
        ]
        if self.table.collisions:
            lines.append(f"  Discarded (local-name collisions): {len(self.table.collisions)}")
        if self.output_path is not None:
            lines.append(f"  Output: {self.output_path}")
        return "\n".join(lines)
