class Config:
    # Sweep parameters (used when not given on the command line)
    ram_size = 16              # RAM size in bytes (conceptual units)
    num_processes = 10         # processes simulated per page size
    process_size = 32          # size of each process, same units as ram_size

    # Reference strings
    refs_per_page = 100        # reference string length = refs_per_page * page count
    seed = None                # numpy RandomState seed; None = fresh entropy

    # Report / plot
    precision = 6              # decimals printed for hit rates
    plot = False               # show a matplotlib plot after the table
    plot_path = None           # save the plot here when set

    # GUI spin box ranges
    max_ram_size = 512
    max_process_size = 512
    max_processes = 100
