import csv, os, time
#so you can report results
def log_render_run(path, n_slices, total, duration_ms, frames, decision):
    if not path:
        return
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    row = [time.strftime("%Y-%m-%d %H:%M:%S"), n_slices, total if total is not None else "", duration_ms, frames, decision]
    header = ["timestamp","n_slices","total","duration_ms","frames","decision"]
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.writer(f)
        if write_header: w.writerow(header)
        w.writerow(row)
