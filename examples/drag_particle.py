# examples/drag_particle.py
from verlet_sim import Simulation, Pointer, default_library
from verlet_sim.renderer import DebugRenderer

library = default_library()
sim = Simulation(library.create("s"))

# grab the pinned end of the rope and pull it down-left
x, y = sim.world.positions[sim.world.index_of("r0")]
sim.pointer_pressed(Pointer(x + 2, y + 2))
for k in range(1, 11):
    sim.pointer_dragged(Pointer(x - 5 * k, y + 5 * k))
    sim.step()
sim.pointer_released()

sim.run(30)
DebugRenderer().render_world(sim.world, sim.frame)

# switch to the cloth scenario, as a key press would
sim.switch("c", library)
print(sim.world)
