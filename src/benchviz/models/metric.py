"""
Metric field enumeration.

Every benchmark observation carries the four numbers reported by
``go test -bench -benchmem``. MetricField names each one explicitly so
callers never build lookup keys out of strings.
"""

from enum import Enum


class MetricField(Enum):
    """The four benchmark metrics.

    The value is the short key used in the per-test JSON files:
    - N: nanoseconds per operation
    - A: allocations per operation
    - B: bytes allocated per operation
    - M: throughput in MB/s
    """

    NS_PER_OP = "N"
    ALLOCS_PER_OP = "A"
    BYTES_PER_OP = "B"
    MB_PER_S = "M"

    @property
    def key(self) -> str:
        """Key of this metric in a per-test JSON record."""
        return self.value

    @property
    def mean_key(self) -> str:
        """Key of this metric in a geometric-means JSON record."""
        return f"{self.value}Mean"

    @property
    def attribute(self) -> str:
        """Attribute name on MetricRecord and GeometricMeanRecord."""
        return self.name.lower()

    @property
    def title(self) -> str:
        """Chart title (the unit)."""
        return _TITLES[self]

    @property
    def panel_id(self) -> str:
        """Identifier of the chart panel showing this metric."""
        return f"{self.value}Plot"

    @classmethod
    def from_key(cls, key: str) -> "MetricField":
        """Look up a metric by JSON key, panel id or member name.

        Raises:
            ValueError: If nothing matches.
        """
        for field in cls:
            if key in (field.key, field.panel_id, field.name, field.attribute):
                return field
        raise ValueError(f"Unknown metric: {key}")


_TITLES = {
    MetricField.NS_PER_OP: "ns/op",
    MetricField.ALLOCS_PER_OP: "allocs/op",
    MetricField.BYTES_PER_OP: "B/op",
    MetricField.MB_PER_S: "MB/s",
}
