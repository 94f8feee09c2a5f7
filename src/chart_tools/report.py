"""Plain-text chart report: request summary, positions, aspects, balance."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from chart_tools.constants import TIME_BODY_NAMES

if TYPE_CHECKING:
    from chart_tools.chart import CelestialBodyPosition, ChartResult, ObservationRequest
    from chart_tools.params import EphemerisParams

_TIME_UNIT_PLURAL = {'hour': 'hours', 'day': 'days', 'min': 'minutes', 'sec': 'seconds'}


def _w(stream: TextIO, line: str) -> None:
    """Write a line to the stream."""
    stream.write(line + '\n')


def _heading(stream: TextIO, title: str) -> None:
    _w(stream, title)
    _w(stream, '-' * len(title))


def _format_offset(hours: float) -> str:
    """UTC offset as '+HH:MM'."""
    sign = '-' if hours < 0 else '+'
    total_min = round(abs(hours) * 60)
    return f'{sign}{total_min // 60:02d}:{total_min % 60:02d}'


def _format_coord(value: float, pos: str, neg: str) -> str:
    return f'{abs(value):.4f}° {pos if value >= 0 else neg}'


def write_request_summary(stream: TextIO, request: ObservationRequest) -> None:
    """Write the Input Parameters section for a chart request.

    Parameters:
        stream: Output text stream.
        request: Request being summarized.
    """
    _heading(stream, 'Input Parameters')
    if request.name:
        _w(stream, f'           Name: {request.name}')
    _w(stream, f'     Local time: {request.moment.isoformat(sep=" ")}')
    if request.moment.tzinfo is None:
        if request.timezone:
            _w(stream, f'      Time zone: {request.timezone}')
        else:
            _w(stream, f'     UTC offset: {_format_offset(request.utc_offset_hours)}')
    _w(stream, f'       UTC time: {request.utc_moment.strftime("%Y-%m-%d %H:%M:%S")}')
    _w(stream, f'       Latitude: {_format_coord(request.latitude_deg, "N", "S")}')
    _w(stream, f'      Longitude: {_format_coord(request.longitude_deg, "E", "W")}')
    _w(stream, ' ')


def write_ephemeris_summary(stream: TextIO, params: EphemerisParams) -> None:
    """Write the Input Parameters section for a longitude table."""
    _heading(stream, 'Input Parameters')
    _w(stream, f'     Start time: {params.start_time.strip()}')
    _w(stream, f'      Stop time: {params.stop_time.strip()}')
    interval = params.interval
    interval_s = str(int(interval)) if interval == int(interval) else str(interval)
    unit = _TIME_UNIT_PLURAL.get(params.time_unit, params.time_unit)
    _w(stream, f'       Interval: {interval_s} {unit}')
    bodies = params.bodies or list(TIME_BODY_NAMES)
    _w(stream, f'         Bodies: {", ".join(bodies)}')
    _w(stream, ' ')


def _position_line(body: CelestialBodyPosition) -> str:
    return (
        f'{body.display_name:<12} {body.sign.symbol} {body.sign.label:<12}'
        f' {body.formatted_degree}  {body.longitude:8.3f}'
    )


def write_chart(stream: TextIO, chart: ChartResult) -> None:
    """Write the full chart report.

    Parameters:
        stream: Output text stream.
        chart: Computed chart.
    """
    _heading(stream, 'Planetary Positions')
    for body in chart.planets:
        _w(stream, _position_line(body))
    _w(stream, ' ')

    _heading(stream, 'Angles and Points')
    for body in (chart.ascendant, chart.midheaven, chart.north_node, chart.lilith):
        _w(stream, _position_line(body))
    _w(stream, ' ')

    _heading(stream, 'Moon Phase')
    phase = chart.moon_phase
    _w(stream, f'{phase.symbol} {phase.name} ({phase.illumination_pct:.1f}% illumination)')
    _w(stream, ' ')

    _heading(stream, 'Aspects')
    if not chart.aspects:
        _w(stream, '(none)')
    for aspect in chart.aspects:
        _w(
            stream,
            f'{aspect.body1:<8} {aspect.aspect_type.symbol} {aspect.body2:<8}'
            f' {aspect.aspect_type.label:<11} orb {aspect.formatted_orb}',
        )
    _w(stream, ' ')

    _heading(stream, 'Elements')
    for element, names in chart.elements:
        _w(stream, f'{element.symbol} {element.value:<6} ({len(names)}) {", ".join(names)}')
    _w(stream, f'Dominant: {chart.dominant_element.value}')
    _w(stream, ' ')

    _heading(stream, 'Modalities')
    for modality, names in chart.modalities:
        _w(stream, f'{modality.value:<8} ({len(names)}) {", ".join(names)}')
    _w(stream, f'Dominant: {chart.dominant_modality.value}')

    if chart.warnings:
        _w(stream, ' ')
        _heading(stream, 'Warnings')
        for warning in chart.warnings:
            _w(stream, warning)
