import os, argparse
import random
import matplotlib.pyplot as plt
import imageio

from routelen import RouteInstance, Traversal
from routelen.experiments import random_route


def best_so_far(inst, n_samples, mode, seed):
    """Best route after each of n_samples random draws."""
    D = inst.distance_matrix()
    rng = random.Random(seed)
    best, best_L = None, None
    history = []
    for _ in range(n_samples):
        route = random_route(inst.n_locations(), rng)
        L = D.length(route, mode)
        if best_L is None or L < best_L:
            best, best_L = route, L
        history.append((best_L, list(best)))
    return history


def visualize(inst, mode, n_samples, outdir, step=5, seed=None):
    os.makedirs(outdir, exist_ok=True)
    history = best_so_far(inst, n_samples, mode, seed)

    coords = inst.coords
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]
    frames = []
    for it in range(0, len(history), step):
        L, route = history[it]
        xs = [coords[i][0] for i in route]
        ys = [coords[i][1] for i in route]
        if mode is Traversal.CYCLIC:
            xs.append(coords[route[0]][0])
            ys.append(coords[route[0]][1])

        plt.figure(figsize=(5,5))
        plt.plot(cx, cy, "o")
        plt.plot(xs, ys, "-")
        plt.title(f"{mode.value} best-so-far\nsample={it+1}  length={L}")
        plt.axis("equal")
        plt.tight_layout()
        frame_path = os.path.join(outdir, f"{mode.value}_frame_{it:03d}.png")
        plt.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close()
        frames.append(frame_path)

    gif_path = os.path.join(outdir, f"{mode.value}_routes.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--mode", choices=[t.value for t in Traversal], default=Traversal.CYCLIC.value)
    p.add_argument("--n", type=int, default=30, help="number of locations")
    p.add_argument("--samples", type=int, default=200)
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=5, help="frame every k samples")
    args = p.parse_args()

    if args.n < 1:
        p.error("--n must be >= 1")
    inst = RouteInstance.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")
    visualize(inst, Traversal(args.mode), args.samples, args.outdir, step=args.step, seed=args.seed)

if __name__ == "__main__":
    main()
