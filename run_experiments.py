# run_experiments.py
import os, json, argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from routelen import RouteInstance, ExperimentConfig, Traversal
from routelen.experiments import sample_route_lengths, run_size_sweep, best_route

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details_by_mode, save_path):
    plt.figure()
    modes = list(details_by_mode.keys())
    for i, mode in enumerate(modes, start=1):
        lengths = [L for (L, route) in details_by_mode[mode]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(modes) + 1), modes)
    plt.ylabel("Route length")
    plt.title("Random route lengths per traversal")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_matrix(inst, save_path):
    D = inst.distance_matrix()
    plt.figure()
    plt.imshow(D.matrix.to_numpy(), cmap="viridis")
    plt.colorbar(label="distance")
    plt.title(f"{inst.name} distance matrix")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=20)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--routes", type=int, default=50)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default=OUTDIR)
    ap.add_argument("--sweep", type=int, nargs="*", default=[5, 10, 20, 40],
                    help="instance sizes for the size sweep")
    args = ap.parse_args()

    cfg = ExperimentConfig(n_locations=args.n, square_size=args.square, n_routes=args.routes, seed=args.seed)
    inst = RouteInstance.random_euclidean(n=cfg.n_locations, seed=cfg.seed, square_size=cfg.square_size,
                                          name=f"demo{cfg.n_locations}")

    records = []
    details_by_mode = {}
    for mode in Traversal:
        stats, details = sample_route_lengths(inst, n_routes=cfg.n_routes, mode=mode, base_seed=cfg.seed)
        print(mode.value, json.dumps(stats, indent=2))
        L, route = best_route(details)
        print(f"shortest {mode.value} route: length={L} route={route}")
        records.append(stats)
        details_by_mode[mode.value] = details

    df_summary = pd.DataFrame.from_records(records)
    summary_csv = ensure(os.path.join(args.outdir, "results_summary.csv"))
    df_summary.to_csv(summary_csv, index=False)
    inst.distance_matrix().to_frame().to_csv(os.path.join(args.outdir, "distance_matrix.csv"))
    plot_scatter(details_by_mode, os.path.join(args.outdir, "results_distribution.png"))
    plot_matrix(inst, os.path.join(args.outdir, "distance_matrix.png"))

    rows = run_size_sweep(args.sweep, modes=tuple(Traversal), base_cfg=cfg, n_routes=10, base_seed=500,
                          csv_path=os.path.join(args.outdir, "size_sweep.csv"))
    print("Sweep rows evaluated:", len(rows))


if __name__ == "__main__":
    main()
