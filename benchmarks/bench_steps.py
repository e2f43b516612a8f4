"""
Microbenchmark: time per frame vs cloth size.
Run:
  python benchmarks/bench_steps.py
"""
import time
from verlet_sim.config import WorldConfig
from verlet_sim.simulation import Simulation
from verlet_sim.scenarios import cloth_world
from verlet_sim.profiler import Profiler

def run(columns: int, rows: int, frames: int = 300, iterations: int = 1):
    prof = Profiler()
    config = WorldConfig(width=1000, height=1000, relax_iterations=iterations)
    world = cloth_world(config, columns=columns, rows=rows, spacing=10.0)
    sim = Simulation(world, config, profiler=prof)

    # warmup
    sim.run(30)
    prof.reset()

    t0 = time.perf_counter()
    sim.run(frames)
    t1 = time.perf_counter()

    per_frame = (t1 - t0) / frames
    return per_frame, len(world), len(world.sticks), prof.stats.summary()

if __name__ == "__main__":
    for columns, rows in [(10, 10), (20, 20), (40, 30), (60, 40)]:
        per_frame, n, m, summary = run(columns, rows)
        print(f"N={n:5d} sticks={m:5d}  frame={1e3*per_frame:8.3f} ms  frames/s={1/per_frame:8.1f}")
        for k in ["integrate", "relax", "bounds"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
