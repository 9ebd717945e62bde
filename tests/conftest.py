import pytest

from common.types import ProjectionParameters
from geospatial.projections import LambertConformalProjector


@pytest.fixture
def conus_parameters():
    """Conterminous US definition: parallels 33/45, origin 23N 96W."""
    return ProjectionParameters(origin_lon=-96.0, origin_lat=23.0, par1=33.0, par2=45.0)


@pytest.fixture
def conus_projector(conus_parameters):
    return LambertConformalProjector.from_parameters(conus_parameters)


@pytest.fixture
def ncep_parameters():
    """NCEP 221-style grid on a 6371229 m sphere, single standard parallel."""
    return ProjectionParameters(
        origin_lon=-107.0,
        origin_lat=50.0,
        par1=50.0,
        par2=50.0,
        false_easting=5632642.22547,
        false_northing=4612545.65137,
        earth_radius=6371229.0,
        linear_unit="m",
    )
