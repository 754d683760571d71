# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import logging
import numpy as np
from pathlib import Path

import numpy.typing as npt
from typing import Any
from typing import Optional

from kiln.events import Event
from kiln.events import EventKind

logger = logging.getLogger(__name__)

PLOTTING_ENABLED = False

try:
    import plotly.graph_objects as go
    from plotly.subplots import make_subplots

except ImportError:
    logger.info(
        "Plotly is not installed, consider installing it or running 'pip install kiln[plot]'."
    )

else:
    PLOTTING_ENABLED = True


# ====================================================
# code
class Trace:
    """
    Event sink storing the history of a run : every explored candidate with its acceptance probability, the
    current and best costs after each decision and the temperature at each step.

    A Trace is reset each time a new run starts, it then holds the history of the last run only.
    """

    # region magic methods
    def __init__(self) -> None:
        self.reset()

    def __repr__(self) -> str:
        return (
            f"Trace of {self.nb_explored} explored candidate(s) over {self.nb_steps} temperature step(s)."
        )

    def __call__(self, event: Event[Any]) -> None:
        if event.kind is EventKind.INITIAL:
            self.reset()
            self.initial_cost = event.cost
            self._current_cost = self._best_cost = event.cost

            if event.temperature is not None:
                self._temperatures.append(event.temperature)

        elif event.kind in (EventKind.ACCEPTED, EventKind.REJECTED):
            accepted = event.kind is EventKind.ACCEPTED

            if accepted:
                self._current_cost = event.cost
                self._best_cost = min(self._best_cost, event.cost)

            self._explored.append(
                (
                    event.step,
                    event.iteration,
                    event.temperature,
                    event.cost,
                    event.acceptance_probability,
                    accepted,
                    self._current_cost,
                    self._best_cost,
                )
            )

        elif event.kind is EventKind.DECREASED:
            self._temperatures.append(event.temperature)

        elif event.kind is EventKind.FINAL:
            self.final_cost = event.cost
            self.final_is_best = event.best

    # endregion

    # region attributes
    @property
    def nb_explored(self) -> int:
        """Number of candidates that were explored (accepted or rejected)."""
        return len(self._explored)

    @property
    def nb_steps(self) -> int:
        """Number of completed temperature steps."""
        return max(0, len(self._temperatures) - 1)

    @property
    def finalized(self) -> bool:
        """Did the run terminate ?"""
        return self.final_cost is not None

    @property
    def temperatures(self) -> npt.NDArray[np.float64]:
        """Temperatures reached at each step, starting with the initial temperature."""
        return np.array(self._temperatures, dtype=np.float64)

    @property
    def steps(self) -> npt.NDArray[np.int64]:
        """Temperature step index of each explored candidate."""
        return self._column(0, np.int64)

    @property
    def iterations(self) -> npt.NDArray[np.int64]:
        """Iteration index (within its temperature step) of each explored candidate."""
        return self._column(1, np.int64)

    @property
    def explored_temperatures(self) -> npt.NDArray[np.float64]:
        """Temperature at which each candidate was explored."""
        return self._column(2, np.float64)

    @property
    def explored_costs(self) -> npt.NDArray[np.float64]:
        """Cost of each explored candidate."""
        return self._column(3, np.float64)

    @property
    def acceptance_probabilities(self) -> npt.NDArray[np.float64]:
        """Acceptance probability computed for each explored candidate."""
        return self._column(4, np.float64)

    @property
    def accepted(self) -> npt.NDArray[np.bool_]:
        """Was each explored candidate accepted ?"""
        return self._column(5, np.bool_)

    @property
    def current_costs(self) -> npt.NDArray[np.float64]:
        """Cost of the current solution after each decision."""
        return self._column(6, np.float64)

    @property
    def best_costs(self) -> npt.NDArray[np.float64]:
        """Cost of the best solution seen so far after each decision."""
        return self._column(7, np.float64)

    # endregion

    # region methods
    def reset(self) -> None:
        """
        Forget all stored history.
        """
        self._temperatures: list[float] = []
        self._explored: list[tuple[Any, ...]] = []
        self._current_cost: Optional[float] = None
        self._best_cost: Optional[float] = None

        self.initial_cost: Optional[float] = None
        self.final_cost: Optional[float] = None
        self.final_is_best = False

    def _column(self, index: int, dtype: Any) -> npt.NDArray[Any]:
        return np.array([row[index] for row in self._explored], dtype=dtype)

    def acceptance_fraction(self, window: Optional[int] = None) -> float:
        """
        Get the proportion of accepted candidates among the last <window> explored candidates.

        Args:
            window: number of last candidates to look at (defaults to all of them).

        Returns:
            The proportion of accepted candidates, NaN if no candidate was explored.
        """
        if window is not None and window < 1:
            raise ValueError(f"Invalid window size '{window}', should be at least 1.")

        accepted = self.accepted if window is None else self.accepted[-window:]

        if not len(accepted):
            return np.nan

        return float(np.mean(accepted))

    def plot(self, save: Path | str | None = None, show: bool = True) -> None:
        """
        Plot temperature, explored/current/best costs and acceptance probabilities along explored candidates.

        Args:
            save: optional path to save the plot as a html file.
            show: render the plot ?
        """
        if not PLOTTING_ENABLED:
            raise ImportError("Plotly is not installed.")

        titles = ["Temperature", "Costs", "Acceptance probability"]

        fig = make_subplots(
            rows=3,
            cols=1,
            shared_xaxes=False,
            subplot_titles=titles,
            vertical_spacing=0.1,
        )

        fig.add_trace(
            go.Scatter(
                x=list(range(len(self._temperatures))),
                y=self.temperatures,
                name="T",
                hovertext=[
                    f"<b>Temperature</b>: {_T:.4f}<br>" f"<b>Step</b>: {step}"
                    for step, _T in enumerate(self._temperatures)
                ],
                hoverinfo="text",
                showlegend=False,
            ),
            row=1,
            col=1,
        )

        explored_x = list(range(self.nb_explored))

        for name, costs, color in (
            ("Explored", self.explored_costs, "rgba(0, 0, 0, 0.3)"),
            ("Current", self.current_costs, "rgba(0, 0, 200, 0.6)"),
            ("Best", self.best_costs, "rgba(252, 196, 25, 1.)"),
        ):
            fig.add_trace(
                go.Scatter(
                    x=explored_x,
                    y=costs,
                    name=name,
                    marker=dict(color=color),
                    hovertext=[
                        f"<b>{name} cost</b>: {cost:.4f}<br>" f"<b>Candidate</b>: {index}"
                        for index, cost in enumerate(costs)
                    ],
                    hoverinfo="text",
                ),
                row=2,
                col=1,
            )

        fig.add_trace(
            go.Scatter(
                x=explored_x,
                y=self.acceptance_probabilities,
                mode="markers",
                marker=dict(
                    color=np.where(self.accepted, "rgba(0, 150, 0, 0.6)", "rgba(200, 0, 0, 0.6)"),
                    size=4,
                ),
                name="ap",
                showlegend=False,
            ),
            row=3,
            col=1,
        )

        fig.update_layout(
            height=800,
            width=600,
            margin=dict(t=40, b=10, l=10, r=10),
            paper_bgcolor="#FFF",
            plot_bgcolor="#FFF",
            font_color="#000000",
        )

        if show:
            fig.show()

        if save is not None:
            fig.write_html(str(save))

    # endregion
