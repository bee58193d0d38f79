"""Data models for the weight API payloads."""

from dataclasses import dataclass, field

import pandas as pd


def _number(value: object, name: str) -> float:
    # bool is an int subclass but never a valid weight
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} is not a number: {value!r}")
    return float(value)


@dataclass
class CurrentPoint:
    """Latest measurement as exchanged on /api/current."""

    point: float

    @classmethod
    def from_json(cls, data: object) -> "CurrentPoint":
        if not isinstance(data, dict) or "point" not in data:
            raise ValueError(f"Response has no 'point' field: {data!r}")
        return cls(point=_number(data["point"], "point"))

    def to_json(self) -> dict:
        return {"point": self.point}


@dataclass(frozen=True)
class Series:
    """Parallel date/weight sequences, in backend order."""

    dates: list[str] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: object, name: str = "series") -> "Series":
        """
        Decode one {"dates": [...], "weights": [...]} block.

        Lengths are not cross-checked; pairing is the backend's contract.
        """
        if not isinstance(data, dict):
            raise ValueError(f"{name} is not an object: {data!r}")
        try:
            dates = data["dates"]
            weights = data["weights"]
        except KeyError as e:
            raise ValueError(f"{name} is missing {e.args[0]!r}") from e
        if not isinstance(dates, list) or not isinstance(weights, list):
            raise ValueError(f"{name}.dates and {name}.weights must be arrays")

        return cls(
            dates=[str(d) for d in dates],
            weights=[_number(w, f"{name}.weights") for w in weights],
        )

    def __len__(self) -> int:
        return len(self.dates)

    def to_frame(self) -> pd.DataFrame:
        """
        Series as a DataFrame.

        Returns:
            DataFrame with DatetimeIndex and 'weight' column
        """
        if not self.dates:
            return pd.DataFrame(columns=["weight"])

        df = pd.DataFrame({"date": pd.to_datetime(self.dates), "weight": self.weights})
        df.set_index("date", inplace=True)
        return df


@dataclass(frozen=True)
class RawAndAveragedSeries:
    """Full history plus the backend's smoothed variant."""

    raw: Series
    average: Series

    @classmethod
    def from_json(cls, data: object) -> "RawAndAveragedSeries":
        if not isinstance(data, dict):
            raise ValueError(f"Series response is not an object: {data!r}")
        for key in ("raw", "average"):
            if key not in data:
                raise ValueError(f"Series response is missing {key!r}")
        return cls(
            raw=Series.from_json(data["raw"], "raw"),
            average=Series.from_json(data["average"], "average"),
        )
