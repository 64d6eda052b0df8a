import sys
from PyQt5.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                           QHBoxLayout, QLabel, QPushButton, QProgressBar,
                           QTabWidget, QSpinBox, QFormLayout, QCheckBox,
                           QTableWidget, QTableWidgetItem, QHeaderView,
                           QMessageBox, QFileDialog)
from PyQt5.QtCore import Qt, QThread, pyqtSignal
from PyQt5.QtGui import QPalette, QColor
import pyqtgraph as pg

from pranalyzer.config import Config
from pranalyzer.policies import Strategy
from pranalyzer.simulation import SessionHistory, SweepParameters, simulate_reference
from pranalyzer.utils.report import build_table, trace_summary
from pranalyzer.utils.trace_generator import ReferenceGenerator
from pranalyzer.utils.workload_loader import load_trace_file

CURVE_PENS = {
    Strategy.FIFO: 'r',
    Strategy.LRU: 'g',
    Strategy.MRU: 'y',
    Strategy.OPTIMAL: 'c',
}


class SweepThread(QThread):
    """Thread to run the page-size sweep and emit progress per page size"""
    update_signal = pyqtSignal(object)   # rows are keyed by Strategy, not str
    finished_signal = pyqtSignal(object)
    error_signal = pyqtSignal(str)

    def __init__(self, history, params, seed=None):
        super().__init__()
        self.history = history
        self.params = params
        self.seed = seed

    def run(self):
        try:
            aggregator = self.history.run(
                self.params,
                generator=ReferenceGenerator(seed=self.seed),
                progress=self.update_signal.emit,
            )
        except Exception as e:
            self.error_signal.emit(str(e))
            return
        self.finished_signal.emit(aggregator)


class MainInterface(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Page Replacement Algorithm Analyzer")
        self.setGeometry(100, 100, 1200, 800)

        self.history = SessionHistory()
        self.sweep_thread = None

        # Setup main widget and layout
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        tabs = QTabWidget()
        layout.addWidget(tabs)
        tabs.addTab(self._create_config_tab(), "Configuration")
        tabs.addTab(self._create_results_tab(), "Results")
        tabs.addTab(self._create_trace_tab(), "Trace")

        self._reset_curves()
        self._set_dark_theme()

    def _create_config_tab(self):
        widget = QWidget()
        layout = QFormLayout(widget)

        self.ram_size = QSpinBox()
        self.ram_size.setRange(0, Config.max_ram_size)
        self.ram_size.setValue(Config.ram_size)
        layout.addRow("RAM Size:", self.ram_size)

        self.num_processes = QSpinBox()
        self.num_processes.setRange(1, Config.max_processes)
        self.num_processes.setValue(Config.num_processes)
        layout.addRow("Number of Processes:", self.num_processes)

        self.process_size = QSpinBox()
        self.process_size.setRange(0, Config.max_process_size)
        self.process_size.setValue(Config.process_size)
        layout.addRow("Process Size:", self.process_size)

        # Fixed seed makes a run reproducible
        self.use_seed = QCheckBox("Fixed seed")
        self.seed = QSpinBox()
        self.seed.setRange(0, 2 ** 31 - 1)
        self.seed.setValue(Config.seed or 0)
        self.use_seed.setChecked(Config.seed is not None)
        seed_row = QHBoxLayout()
        seed_row.addWidget(self.use_seed)
        seed_row.addWidget(self.seed)
        layout.addRow("Seed:", seed_row)

        self.start_button = QPushButton("Run Analysis")
        self.start_button.clicked.connect(self._start_sweep)
        layout.addRow(self.start_button)

        self.progress_bar = QProgressBar()
        layout.addRow("Progress:", self.progress_bar)

        self.status_label = QLabel("No runs yet")
        layout.addRow(self.status_label)
        return widget

    def _create_results_tab(self):
        widget = QWidget()
        layout = QVBoxLayout(widget)

        self.results_table = QTableWidget()
        self.results_table.verticalHeader().setVisible(False)
        layout.addWidget(self.results_table)

        self.hit_rate_plot = pg.PlotWidget(title="Hit Rate vs Page Size")
        self.hit_rate_plot.setLabel('left', 'Hit Rate')
        self.hit_rate_plot.setLabel('bottom', 'Page Size')
        self.hit_rate_plot.setYRange(0, 1)
        self.hit_rate_plot.addLegend()
        self.hit_rate_plot.showGrid(x=True, y=True)
        self.curves = {
            strategy: self.hit_rate_plot.plot(pen=CURVE_PENS[strategy], symbol='o',
                                              symbolBrush=CURVE_PENS[strategy],
                                              name=strategy.label)
            for strategy in Strategy
        }
        layout.addWidget(self.hit_rate_plot)
        return widget

    def _create_trace_tab(self):
        widget = QWidget()
        layout = QFormLayout(widget)
        self.trace_data = None

        self.load_button = QPushButton("Load Trace File")
        self.load_button.clicked.connect(self._load_trace)
        layout.addRow(self.load_button)

        self.trace_label = QLabel("No trace loaded")
        layout.addRow(self.trace_label)

        self.trace_frames = QSpinBox()
        self.trace_frames.setRange(0, Config.max_ram_size)
        self.trace_frames.setValue(3)
        layout.addRow("Frames:", self.trace_frames)

        self.trace_button = QPushButton("Simulate Trace")
        self.trace_button.setEnabled(False)
        self.trace_button.clicked.connect(self._simulate_trace)
        layout.addRow(self.trace_button)

        # one line per strategy: faults, hits, hit rate
        self.trace_stats = {}
        for strategy in Strategy:
            value_label = QLabel("-")
            value_label.setStyleSheet("font-family: monospace;")
            layout.addRow(f"{strategy.label}:", value_label)
            self.trace_stats[strategy.label] = value_label
        return widget

    def _set_dark_theme(self):
        app = QApplication.instance()
        app.setStyle('Fusion')
        palette = QPalette()
        palette.setColor(QPalette.Window, QColor(53, 53, 53))
        palette.setColor(QPalette.WindowText, Qt.white)
        palette.setColor(QPalette.Base, QColor(25, 25, 25))
        palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
        palette.setColor(QPalette.Text, Qt.white)
        palette.setColor(QPalette.Button, QColor(53, 53, 53))
        palette.setColor(QPalette.ButtonText, Qt.white)
        palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        palette.setColor(QPalette.HighlightedText, Qt.black)
        app.setPalette(palette)

    def _reset_curves(self):
        self.curve_data = {strategy: ([], []) for strategy in Strategy}
        for curve in self.curves.values():
            curve.setData([], [])

    def _start_sweep(self):
        params = SweepParameters(ram_size=self.ram_size.value(),
                                 num_processes=self.num_processes.value(),
                                 process_size=self.process_size.value())
        seed = self.seed.value() if self.use_seed.isChecked() else None

        self._reset_curves()
        self.progress_bar.setValue(0)
        self.start_button.setEnabled(False)

        self.sweep_thread = SweepThread(self.history, params, seed=seed)
        self.sweep_thread.update_signal.connect(self._update_progress)
        self.sweep_thread.finished_signal.connect(self._sweep_finished)
        self.sweep_thread.error_signal.connect(self._sweep_failed)
        self.sweep_thread.start()

    def _update_progress(self, update):
        self.progress_bar.setValue(int(update['progress']))
        row = update['row'] or {}
        for strategy, (xs, ys) in self.curve_data.items():
            tally = row.get(strategy)
            if tally is None or tally.hit_rate is None:
                continue
            xs.append(update['page_size'])
            ys.append(tally.hit_rate)
            self.curves[strategy].setData(xs, ys)

    def _sweep_finished(self, aggregator):
        self._fill_table(aggregator)
        params, _ = self.history.last()
        self.status_label.setText(
            f"Run #{len(self.history)}: RAM={params.ram_size}, "
            f"processes={params.num_processes}, process size={params.process_size}")
        self.start_button.setEnabled(True)

    def _sweep_failed(self, message):
        QMessageBox.warning(self, "Error", f"Analysis failed: {message}")
        self.start_button.setEnabled(True)

    def _load_trace(self):
        filename, _ = QFileDialog.getOpenFileName(
            self,
            "Select Trace File",
            "",
            "Trace Files (*.txt *.npy);;All Files (*.*)"
        )

        if filename:
            try:
                self.trace_data = load_trace_file(filename)
            except Exception as e:
                QMessageBox.warning(self, "Error", f"Failed to load trace: {str(e)}")
                return
            self.trace_label.setText(
                f"{filename}: {len(self.trace_data)} references, "
                f"{len(set(self.trace_data))} distinct pages")
            self.trace_button.setEnabled(True)

    def _simulate_trace(self):
        results = simulate_reference(self.trace_data, self.trace_frames.value())
        for label, faults, hits, rate in trace_summary(results):
            self.trace_stats[label].setText(f"faults {faults}, hits {hits}, hit rate {rate}")

    def _fill_table(self, aggregator):
        table = build_table(aggregator)
        header, rows = table[0], table[1:]
        self.results_table.clear()
        self.results_table.setColumnCount(len(header))
        self.results_table.setRowCount(len(rows))
        self.results_table.setHorizontalHeaderLabels(header)
        for i, row in enumerate(rows):
            for j, cell in enumerate(row):
                item = QTableWidgetItem(cell)
                item.setFlags(item.flags() & ~Qt.ItemIsEditable)
                self.results_table.setItem(i, j, item)
        self.results_table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)


def main():
    app = QApplication(sys.argv)
    window = MainInterface()
    window.show()
    sys.exit(app.exec_())

if __name__ == '__main__':
    main()
