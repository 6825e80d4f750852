import numpy as np

from engine import ParticleBackground


class FakeHost:
    """Delivers scripted events between frames and records presented frames."""
    def __init__(self, frames, events=None):
        self.remaining = frames
        self.events = events or {}
        self.polls = 0
        self.presented = []

    def handle_events(self, engine):
        action = self.events.get(self.polls)
        self.polls += 1
        if action is not None:
            action(engine)
        if self.remaining == 0:
            return False
        self.remaining -= 1
        return True

    def present(self, surface):
        self.presented.append(surface.size)


def place_particle(engine, x, y, radius=3.0):
    particles = engine.particles
    particles.positions[:] = [x, y]
    particles.velocities[:] = 0.0
    particles.radii[:] = radius


def test_population_sized_from_initial_surface(surface):
    engine = ParticleBackground(surface, {"seed": 5})

    assert engine.particles.particle_count == 50


def test_resize_keeps_particle_count(surface, viewport):
    engine = ParticleBackground(surface, {"seed": 5})
    viewport.width, viewport.height = 2000, 1000

    engine.on_resize()

    assert surface.size == (2000, 1000)
    assert engine.particles.particle_count == 50
    assert engine.particles.positions.shape == (50, 2)


def test_render_frame_paints_in_accent_color(surface, theme):
    engine = ParticleBackground(surface, {"seed": 5})
    place_particle(engine, 40.0, 60.0)

    engine.render_frame()

    pixel = surface.layer.get_at((40, 60))
    accent = theme.accent_color()
    assert (pixel.r, pixel.g, pixel.b) == (accent.r, accent.g, accent.b)
    assert engine.frame_count == 1


def test_theme_change_shows_on_next_frame(surface, theme):
    engine = ParticleBackground(surface, {"seed": 5})
    place_particle(engine, 40.0, 60.0)
    engine.render_frame()
    positions = engine.particles.positions.copy()

    theme.toggle_theme()
    engine.render_frame()

    pixel = surface.layer.get_at((40, 60))
    accent = theme.accent_color()
    assert theme.current_theme == "light"
    assert (pixel.r, pixel.g, pixel.b) == (accent.r, accent.g, accent.b)
    np.testing.assert_array_equal(engine.particles.positions, positions)


def test_frame_clears_previous_paint(surface):
    engine = ParticleBackground(surface, {"seed": 5})
    place_particle(engine, 40.0, 60.0)
    engine.render_frame()

    place_particle(engine, 400.0, 300.0)
    engine.render_frame()

    assert surface.layer.get_at((40, 60)).a == 0
    assert surface.layer.get_at((400, 300)).a == 255


def test_positions_within_extents_after_frames(surface):
    engine = ParticleBackground(surface, {"seed": 9})

    for _ in range(200):
        engine.render_frame()

    positions = engine.particles.positions
    assert np.all((positions[:, 0] >= 0) & (positions[:, 0] <= surface.width))
    assert np.all((positions[:, 1] >= 0) & (positions[:, 1] <= surface.height))


def test_zero_area_surface_runs_and_paints_nothing(viewport, theme):
    from surface import SurfaceManager
    viewport.width, viewport.height = 0, 0
    engine = ParticleBackground(SurfaceManager(viewport, theme), {"seed": 1})

    frames = engine.run(FakeHost(frames=3))

    assert frames == 3
    assert engine.particles.particle_count == 0


def test_run_stops_when_host_tears_down(surface):
    engine = ParticleBackground(surface, {"seed": 5})
    host = FakeHost(frames=4)

    frames = engine.run(host)

    assert frames == 4
    assert engine.frame_count == 4
    assert len(host.presented) == 4


def test_run_respects_max_frames(surface):
    engine = ParticleBackground(surface, {"seed": 5})
    host = FakeHost(frames=100)

    assert engine.run(host, max_frames=10, log_throttle=3) == 10
    assert len(host.presented) == 10


def test_resize_between_frames_is_seen_by_next_frame(surface, viewport):
    engine = ParticleBackground(surface, {"seed": 5})

    def shrink(e):
        viewport.width, viewport.height = 300, 200
        e.on_resize()

    host = FakeHost(frames=3, events={1: shrink})
    engine.run(host)

    assert host.presented == [(1000, 500), (300, 200), (300, 200)]
    positions = engine.particles.positions
    assert np.all(positions[:, 0] <= 300)
    assert np.all(positions[:, 1] <= 200)
    assert engine.particles.particle_count == 50


def test_resize_logs_new_size(surface, viewport, caplog):
    engine = ParticleBackground(surface, {"seed": 5})
    viewport.width, viewport.height = 2000, 1000

    with caplog.at_level("INFO"):
        engine.on_resize()

    assert "Surface resized to (2000, 1000); keeping 50 particles." in caplog.text
