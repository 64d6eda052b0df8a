from pranalyzer.config import Config
from pranalyzer.policies import Strategy

NOT_APPLICABLE_TEXT = "N/A"


def format_rate(tally, precision=Config.precision):
    if tally is None or tally.hit_rate is None:
        return NOT_APPLICABLE_TEXT
    return f"{tally.hit_rate:.{precision}f}"


def build_table(aggregator, strategies=tuple(Strategy), precision=Config.precision):
    """Return the table as rows of cell strings, header first."""
    table = [["Page Size"] + [f"{s.label}(Hit Rate)" for s in strategies]]
    for page_size in range(len(aggregator)):
        row = aggregator.row(page_size) or {}
        table.append([str(page_size)] +
                     [format_rate(row.get(s), precision) for s in strategies])
    return table


def format_table(aggregator, strategies=tuple(Strategy), precision=Config.precision):
    """Render hit rates per page size as a bordered ASCII table."""
    table = build_table(aggregator, strategies, precision)
    widths = [max(len(row[j]) for row in table) for j in range(len(table[0]))]

    lines = []
    for row in table:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        lines.append("| " + " | ".join(cells) + " |")
    border = "-" * len(lines[0])
    return "\n".join([border] + lines + [border])


def trace_summary(results, precision=Config.precision):
    """(label, faults, hits, hit rate text) per strategy for one reference string."""
    return [(strategy.label, tally.faults, tally.hits, format_rate(tally, precision))
            for strategy, tally in results.items()]
