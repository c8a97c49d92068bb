"""Presentation helpers for the artist chart and song table"""
from typing import Any, Dict, List

from streaming_summary.models.summary import ChartPayload, SongStatEntry, SummaryResponse

# Slice colours, top artist first; the last one doubles as the catch-all colour
PALETTE = ['#4CAF50', '#FF9800', '#2196F3', '#E91E63', '#9C27B0', '#B0BEC5']

# Colours for the per-artist frequency chart, cycled when there are more artists
FREQUENCY_PALETTE = [
    '#FF6384', '#36A2EB', '#FFCE56', '#4BC0C0', '#9966FF',
    '#FF9F40', '#E7E9ED', '#8B0000', '#00FF00', '#FFD700'
]

def _slice_colours(count: int, palette: List[str] = PALETTE) -> List[str]:
    return [palette[i % len(palette)] for i in range(count)]

def build_pie_chart(chart: ChartPayload) -> Dict[str, Any]:
    """Chart.js-style pie payload for the artist chart"""
    return {
        'type': 'pie',
        'title': chart.title,
        'labels': list(chart.labels),
        'datasets': [
            {
                'data': list(chart.values),
                'backgroundColor': _slice_colours(len(chart.values)),
                'borderColor': '#fff',
                'borderWidth': 1,
                'hoverOffset': 20,
                'borderRadius': 10
            }
        ],
        'dataLabels': list(chart.percentages)
    }

def build_frequency_chart(chart: ChartPayload) -> Dict[str, Any]:
    """Chart.js-style pie payload with one slice per artist"""
    return {
        'type': 'pie',
        'title': chart.title,
        'labels': list(chart.labels),
        'datasets': [
            {
                'data': list(chart.values),
                'backgroundColor': _slice_colours(len(chart.values), FREQUENCY_PALETTE)
            }
        ],
        'dataLabels': list(chart.percentages)
    }

def rank_songs(song_stats: List[SongStatEntry], limit: int = 10) -> List[SongStatEntry]:
    """Most played songs first, ties broken by listening time"""
    return sorted(song_stats, key=lambda s: (s.plays, s.total_ms), reverse=True)[:limit]

def _bar(value: int, max_value: int, width: int = 30) -> str:
    if max_value == 0:
        return ""
    filled = int((value / max_value) * width)
    return "█" * filled + "░" * (width - filled)

def render_text_report(response: SummaryResponse, top_songs: int = 10) -> str:
    """Plain-text version of the summary for the terminal"""
    lines = [
        "=" * 50,
        "  Spotify Stream History",
        "=" * 50,
        f"Total unique songs: {response.unique_song_count}",
        ""
    ]

    chart = response.chart
    if chart.values:
        lines.append(chart.title)
        max_value = max(chart.values)
        width = max(len(label) for label in chart.labels)
        for label, value, pct in zip(chart.labels, chart.values, chart.percentages):
            lines.append(f"  {label:<{width}} |{_bar(value, max_value)}| {value} ({pct})")
        lines.append("")

    ranked = rank_songs(response.song_stats, top_songs)
    if ranked:
        lines.append("Most played songs:")
        for i, stat in enumerate(ranked, 1):
            lines.append(f"  {i}. {stat.song} by {stat.artist} ({stat.plays} plays, {stat.minutes} min)")

    return "\n".join(lines)
