"""One-dimensional elementary cellular automaton on a ring."""

from numbers import Integral
from typing import Iterator, List, Optional, Sequence, Union
import logging
import numpy as np
import torch
import torch.nn.functional as F

from .errors import InvalidGeneration, InvalidWidth
from .rule import RuleTable

logger = logging.getLogger(__name__)

CellSequence = Union[Sequence[int], np.ndarray]


class ElementaryAutomaton:
    """Two-state, radius-1 cellular automaton with periodic boundaries.

    The automaton holds a single current generation. Each call to
    next_generation() computes every cell from the same snapshot and then
    replaces the generation wholesale; no earlier generations are kept.
    """

    def __init__(
        self,
        rule_number: int,
        width: int,
        initial_generation: Optional[CellSequence] = None,
    ) -> None:
        """Create an automaton.

        Args:
            rule_number: Wolfram rule number (0-255)
            width: Number of cells in the ring
            initial_generation: Optional starting cells. Shorter sequences are
                centered in a dead ring, longer ones are truncated. Defaults to
                a single live cell at index width // 2.

        Raises:
            InvalidRuleNumber: If rule_number is outside [0, 255]
            InvalidWidth: If width is not a positive integer
            InvalidGeneration: If initial_generation is not a flat 0/1 sequence
        """
        self._rule = RuleTable(rule_number)

        if isinstance(width, bool) or not isinstance(width, Integral) or width <= 0:
            raise InvalidWidth(width)
        self._width = int(width)

        if initial_generation is None:
            cells = self._single_seed(self._width)
        else:
            cells = self._fit_to_width(self._validate_cells(initial_generation), self._width)

        self._cells = cells
        self._generation = 0

        # Neighborhood value kernel: left*4 + middle*2 + right
        self._torch_input = torch.zeros(1, 1, self._width, dtype=torch.float32)
        self._torch_kernel = torch.tensor([4, 2, 1], dtype=torch.float32).view(1, 1, 3)

    @staticmethod
    def _single_seed(width: int) -> np.ndarray:
        cells = np.zeros(width, dtype=np.int8)
        cells[width // 2] = 1
        return cells

    @staticmethod
    def _validate_cells(initial_generation: CellSequence) -> np.ndarray:
        """Convert a user supplied generation to an int8 array.

        Raises:
            InvalidGeneration: If the data is not 1-D or holds values other than 0 and 1
        """
        try:
            arr = np.asarray(initial_generation)
        except (TypeError, ValueError) as e:
            raise InvalidGeneration(f"Initial generation is not a sequence of cells: {e}") from e

        if arr.ndim != 1:
            raise InvalidGeneration(f"Initial generation must be one-dimensional, got shape {arr.shape}")

        if arr.size and arr.dtype.kind not in "biuf":
            raise InvalidGeneration(f"Initial generation must hold numbers, got dtype {arr.dtype}")

        if arr.size and not np.isin(arr, (0, 1)).all():
            raise InvalidGeneration("Initial generation may only contain 0 and 1")

        return arr.astype(np.int8)

    @staticmethod
    def _fit_to_width(cells: np.ndarray, width: int) -> np.ndarray:
        """Center a short generation in dead cells or truncate a long one."""
        length = len(cells)
        if length == width:
            return cells.copy()

        logger.warning(
            "Initial generation length (%d) does not match width (%d). Adjusting...",
            length,
            width,
        )

        if length > width:
            return cells[:width].copy()

        diff = width - length
        leading = diff // 2
        fitted = np.zeros(width, dtype=np.int8)
        fitted[leading:leading + length] = cells
        return fitted

    @property
    def rule(self) -> RuleTable:
        """Rule table driving this automaton."""
        return self._rule

    @property
    def rule_number(self) -> int:
        return self._rule.rule_number

    @property
    def width(self) -> int:
        """Number of cells in the ring."""
        return self._width

    @property
    def generation(self) -> int:
        """Number of steps taken since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of live cells in the current generation."""
        return int(np.count_nonzero(self._cells))

    @property
    def density(self) -> float:
        """Fraction of live cells in the current generation."""
        return self.population / self._width

    def neighborhoods(self) -> np.ndarray:
        """Neighborhood value (0-7) of every cell in the current generation.

        Uses a circular convolution so cell 0 sees cell width-1 on its left
        and cell width-1 sees cell 0 on its right.

        Returns:
            int64 array of length width
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        padded = F.pad(self._torch_input, (1, 1), mode="circular")
        values = F.conv1d(padded, self._torch_kernel)
        return values[0, 0].numpy().astype(np.int64)

    def next_generation(self) -> np.ndarray:
        """Advance the automaton by one generation.

        Returns:
            Copy of the new generation
        """
        self._cells = self._rule.lookup(self.neighborhoods())
        self._generation += 1
        return self._cells.copy()

    def current_generation(self) -> np.ndarray:
        """Copy of the current generation."""
        return self._cells.copy()

    def evolve(self, steps: int) -> Iterator[np.ndarray]:
        """Yield the next `steps` generations.

        Args:
            steps: Number of generations to produce

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError(f"Steps must be non-negative, got {steps}")

        for _ in range(steps):
            yield self.next_generation()

    def to_list(self) -> List[int]:
        """Current generation as a list of ints."""
        return self._cells.tolist()

    def render(self, live: str = "█", dead: str = " ") -> str:
        """Render the current generation as a single line of glyphs.

        Args:
            live: Glyph for live cells
            dead: Glyph for dead cells
        """
        return "".join(live if cell else dead for cell in self._cells)

    def __repr__(self) -> str:
        return (
            f"ElementaryAutomaton(rule_number={self.rule_number}, width={self._width}, "
            f"generation={self._generation})"
        )

    def __str__(self) -> str:
        return self.render()
