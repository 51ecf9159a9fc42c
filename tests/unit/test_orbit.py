"""
Unit tests for the damped orbit camera smoothing.
"""

import pytest

from lorenzscene.view.widgets.orbit import DampedOrbit, orbit_angles


class TestOrbitAngles:
    """Test cases for camera angles around the focal point."""

    def test_on_z_axis(self):
        assert orbit_angles((0, 0, 10), (0, 0, 0)) == pytest.approx((0.0, 0.0))

    def test_on_x_axis(self):
        assert orbit_angles((10, 0, 0), (0, 0, 0)) == pytest.approx((90.0, 0.0))

    def test_above(self):
        """Test a camera straight above has elevation 90."""
        assert orbit_angles((0, 10, 0), (0, 0, 0))[1] == pytest.approx(90.0)

    def test_default_camera(self):
        """Test the initial camera at (15, 15, 15) looking at the origin."""
        azimuth, elevation = orbit_angles((15, 15, 15), (0, 0, 0))

        assert azimuth == pytest.approx(45.0)
        assert elevation == pytest.approx(35.2644, abs=1e-4)

    def test_relative_to_focal_point(self):
        """Test angles are measured from the focal point, not the origin."""
        assert orbit_angles((1, 1, 11), (1, 1, 1)) == pytest.approx((0.0, 0.0))


class TestDampedOrbit:
    """Test cases for tracking and coasting."""

    def test_at_rest(self):
        """Test a fresh orbit does not move the camera."""
        assert DampedOrbit().coast() is None

    def test_velocity_from_drag(self):
        """Test the last drag delta becomes the velocity."""
        orbit = DampedOrbit(damping=0.05)

        orbit.track(10.0, 0.0)
        orbit.track(14.0, 1.0)

        assert orbit.velocity == pytest.approx((4.0, 1.0))

    def test_coast_decays(self):
        """Test the velocity shrinks by the damping factor each frame."""
        orbit = DampedOrbit(damping=0.05)
        orbit.track(10.0, 0.0)
        orbit.track(14.0, 1.0)
        orbit.release()

        first = orbit.coast()
        second = orbit.coast()

        assert first == pytest.approx((4.0, 1.0))
        assert second == pytest.approx((3.8, 0.95))

    def test_coast_comes_to_rest(self):
        """Test coasting stops after finitely many frames."""
        orbit = DampedOrbit(damping=0.05)
        orbit.track(0.0, 0.0)
        orbit.track(5.0, 0.0)
        orbit.release()

        frames = 0
        while orbit.coast() is not None:
            frames += 1
            assert frames < 1000

        assert orbit.velocity == (0.0, 0.0)

    def test_azimuth_wraps(self):
        """Test crossing the +-180 seam gives a small delta."""
        orbit = DampedOrbit()

        orbit.track(179.0, 0.0)
        orbit.track(-179.0, 0.0)

        assert orbit.velocity[0] == pytest.approx(2.0)

    def test_release_starts_new_drag(self):
        """Test the first sample after a release does not produce a jump."""
        orbit = DampedOrbit()
        orbit.track(0.0, 0.0)
        orbit.track(1.0, 0.0)
        orbit.release()

        orbit.track(90.0, 0.0)

        assert orbit.velocity == pytest.approx((1.0, 0.0))

    def test_stop(self):
        orbit = DampedOrbit()
        orbit.track(0.0, 0.0)
        orbit.track(3.0, 0.0)

        orbit.stop()

        assert orbit.coast() is None

    @pytest.mark.parametrize("damping", [0.0, -0.1, 1.5])
    def test_invalid_damping(self, damping):
        with pytest.raises(ValueError):
            DampedOrbit(damping=damping)


if __name__ == "__main__":
    pytest.main([__file__])
