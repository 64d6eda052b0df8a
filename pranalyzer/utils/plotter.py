import matplotlib.pyplot as plt

from pranalyzer.policies import Strategy


class Plotter:
    def plot_hit_rates(self, aggregator, strategies=tuple(Strategy),
                       title="Hit Rate vs Page Size", save_path=None, show=True):
        """Plot one hit-rate curve per strategy against page size.

        Page sizes without a computed rate (page size 0, empty reference
        strings) are left out of the curves.
        """
        fig = plt.figure(figsize=(10, 6))
        for strategy in strategies:
            points = aggregator.hit_rates(strategy)
            if not points:
                continue
            page_sizes, rates = zip(*points)
            plt.plot(page_sizes, rates, marker='o', linewidth=2, label=strategy.label)

        plt.xlabel('Page Size')
        plt.ylabel('Hit Rate')
        plt.ylim(0, 1.0)
        plt.title(title)
        plt.grid(True, alpha=0.3)
        if plt.gca().get_legend_handles_labels()[0]:
            plt.legend()
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show:
            plt.show()
        else:
            plt.close(fig)
        return fig
