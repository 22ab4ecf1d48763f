"""
Table Reporter

Renders the exposure table in two text formats:

- a grid table using Markdown pipe-table syntax,
- a comma-separated row dump for spreadsheets, with the header repeated
  halfway down so long printouts stay readable.

Both formats share the same cell formatting, so every (shutter, filter) cell
holds identical text in both.
"""

import os
import sys
import logging
from typing import Any, Dict, List, Optional, Sequence, TextIO

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from models import Filter, Shutter, pad, COLUMN_WIDTH
from settings import load_config

logger = logging.getLogger(__name__)

REPORT_FORMATS = ('grid', 'rows')

NO_FILTER_LABEL = "no ND"
ROW_SEPARATOR = ",  "


class TableReporter:
    """
    Generates exposure tables for every shutter speed and filter stack.
    
    Rows follow the shutter order as given and columns follow the filter order
    as given; nothing is re-sorted here.
    
    Attributes:
        combinations: Filter stacks, one column each
        shutters: Shutter speeds, one row each
        formats: Formats written by ``generate_report``
        width: Column width, widened to fit the longest filter label
    
    Example:
        >>> reporter = TableReporter(combinations, BASE_SHUTTERS)
        >>> print(reporter.format_grid_table())
    """
    
    def __init__(self, combinations: Sequence[Filter], shutters: Sequence[Shutter],
                 formats: Optional[Sequence[str]] = None):
        """
        Initialize table reporter.
        
        Args:
            combinations: Filter stacks sorted for display
            shutters: Shutter speeds in display order
            formats: Formats to write, any of ``REPORT_FORMATS`` (default: all)
        """
        self.combinations = list(combinations)
        self.shutters = list(shutters)
        self.formats = self._check_formats(REPORT_FORMATS if formats is None else formats)
        self.width = max([COLUMN_WIDTH] + [len(c.label) for c in self.combinations])
    
    @staticmethod
    def _check_formats(formats: Sequence[str]) -> List[str]:
        if isinstance(formats, str):
            formats = [formats]
        formats = list(formats)
        
        if not formats:
            raise ValueError(f"At least one report format is needed (choose from: {', '.join(REPORT_FORMATS)})")
        
        unknown = [str(name) for name in formats if name not in REPORT_FORMATS]
        if unknown:
            raise ValueError(
                f"Unknown report format(s): {', '.join(unknown)} "
                f"(choose from: {', '.join(REPORT_FORMATS)})"
            )
        return formats
    
    @classmethod
    def from_config(cls, combinations: Sequence[Filter], shutters: Sequence[Shutter],
                    config_path: str = 'config.yaml') -> 'TableReporter':
        """Create TableReporter from configuration file."""
        return cls.from_settings(combinations, shutters, load_config(config_path))
    
    @classmethod
    def from_settings(cls, combinations: Sequence[Filter], shutters: Sequence[Shutter],
                      config: Dict[str, Any]) -> 'TableReporter':
        """Create TableReporter from an already loaded configuration."""
        section = config.get('reporting') or {}
        return cls(combinations=combinations, shutters=shutters, formats=section.get('formats'))
    
    def _cells(self, shutter: Shutter) -> List[str]:
        """Unfiltered time followed by the time behind each filter stack."""
        cells = [shutter.to_string()]
        for combination in self.combinations:
            cells.append(shutter.to_string_with_filter_stops(combination.stops))
        return [pad(cell, self.width) for cell in cells]
    
    def _header_cells(self) -> List[str]:
        return [pad(NO_FILTER_LABEL, self.width)] + [
            pad(combination.label, self.width) for combination in self.combinations
        ]
    
    @staticmethod
    def _grid_line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(cells) + " |"
    
    def format_grid_table(self) -> str:
        """
        Format the grid (pipe) table.
        
        Returns:
            Header row, dash separator row, then one row per shutter
        """
        # "no ND" is left-aligned in the grid header
        header = [f"{NO_FILTER_LABEL:<{self.width}}"] + self._header_cells()[1:]
        lines = [
            self._grid_line(header),
            self._grid_line(["-" * self.width] * len(header)),
        ]
        
        for shutter in self.shutters:
            lines.append(self._grid_line(self._cells(shutter)))
        
        return "\n".join(lines)
    
    def format_row_dump(self) -> str:
        """
        Format the comma-separated row dump.
        
        A blank line and the header precede the first row and every row whose
        index is a multiple of half the row count, which for an even count
        means the top and the middle. With fewer than two rows the header
        appears once.
        
        Returns:
            Row dump text
        """
        header = ROW_SEPARATOR.join(self._header_cells())
        middle = len(self.shutters) // 2
        lines = []
        
        if not self.shutters:
            lines.extend(["", header])
        
        for index, shutter in enumerate(self.shutters):
            if (middle and index % middle == 0) or (not middle and index == 0):
                lines.extend(["", header])
            lines.append(ROW_SEPARATOR.join(self._cells(shutter)))
        
        return "\n".join(lines)
    
    def format_report(self, formats: Optional[Sequence[str]] = None) -> str:
        """Format the requested tables, in order, as one text block."""
        renderers = {
            'grid': self.format_grid_table,
            'rows': self.format_row_dump,
        }
        formats = self.formats if formats is None else self._check_formats(formats)
        sections = [renderers[name]() for name in formats]
        return "\n".join(sections) + "\n"
    
    
    def generate_report(self, stream: Optional[TextIO] = None,
                        output_path: Optional[str] = None,
                        formats: Optional[Sequence[str]] = None) -> Optional[str]:
        """
        Write the report to a stream or a file.
        
        Args:
            stream: Text stream to write to (defaults to stdout)
            output_path: File to write instead of a stream
            formats: Formats overriding the reporter's own
        
        Returns:
            Path of the written file, or None when writing to a stream
        
        Example:
            >>> reporter.generate_report(output_path='exposure_table.md')
            'exposure_table.md'
        """
        report_text = self.format_report(formats)
        
        if output_path:
            output_dir = os.path.dirname(output_path)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(report_text)
            
            logger.info(f"Generated exposure table: {output_path}")
            return output_path
        
        (stream or sys.stdout).write(report_text)
        logger.debug(
            f"Wrote {len(self.shutters)} rows x {len(self.combinations) + 1} columns "
            f"({', '.join(self.formats if formats is None else formats)})"
        )
        return None
