from pranalyzer.utils.trace_generator import load_reference


class WorkloadLoader:
    def load_reference(self, path):
        # simple loader: each non-empty line contains one page id
        pages = []
        with open(path, 'r') as f:
            for line in f:
                s = line.split('#', 1)[0].strip()
                if not s:
                    continue
                try:
                    page = int(s, 0)
                except ValueError:
                    # skip lines that are not page ids
                    continue
                if page <= 0:
                    raise ValueError(f"Page ids must be positive, got {page} in {path}")
                pages.append(page)
        return tuple(pages)


def load_trace_file(path):
    """Load a reference string from a .npy file or a text trace."""
    if str(path).endswith('.npy'):
        return load_reference(path)
    return WorkloadLoader().load_reference(path)
