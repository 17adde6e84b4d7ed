"""
Exceptions raised by the chart engine.

Only caller mistakes and matplotlib failures raise. Degenerate data the
renderers can still lay out (empty datasets, zero totals, a closed or
missing surface) returns None or draws zero-sized shapes instead. The CLI
turns any DashboardChartsError into "Error: ..." on stderr and exit code 1.
"""


class DashboardChartsError(Exception):
    """Base class; also raised directly by the CLI for unreadable config files."""
    pass


class DatasetError(DashboardChartsError):
    """
    Records that cannot become chart points.

    Raised by ``load_dataset`` for missing, unparseable or wrongly shaped
    files, by ``CategoricalPoint.from_dict`` and ``TimePoint.from_dict``
    for missing fields, non-numeric values and buckets that are not dates,
    and by the API when a build trips over a bad bucket or when
    ``create_chart`` is handed an empty dataset.
    """
    pass


class RenderError(DashboardChartsError):
    """
    A surface could not draw or export a chart.

    ``Surface.execute`` raises it for draw ops it does not know and for a
    closed surface; ``draw_result`` wraps matplotlib failures while
    replaying ops; ``Surface.save`` and ``Surface.to_png_bytes`` wrap
    failures writing the Agg canvas.
    """
    pass


class InvalidParameterError(DashboardChartsError):
    """
    Bad chart options, caught before anything is drawn.

    Unknown chart kinds (``get_renderer``), colors matplotlib cannot parse
    (``vertical_gradient``), empty palettes (``palette_color``), non-positive
    surface sizes (``Surface``) and configurations failing
    ``Config.validate`` when passed to the API.
    """
    pass
