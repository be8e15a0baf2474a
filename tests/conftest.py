import pytest

from chromacam import RGB, ViewingConditions

# Moderate-chroma colors the HCT search reproduces closely.
ROUND_TRIP_RGB = [
    (0.5, 0.5, 0.5),
    (0.6, 0.5, 0.4),
    (0.4, 0.5, 0.6),
    (0.45, 0.55, 0.45),
    (0.7, 0.6, 0.65),
    (0.3, 0.35, 0.4),
]


@pytest.fixture
def default_vc():
    return ViewingConditions.default()


@pytest.fixture
def dim_vc():
    return ViewingConditions.make(
        adapting_luminance=40.0,
        background_lstar=20.0,
        surround=0.5,
    )


@pytest.fixture(params=ROUND_TRIP_RGB, ids=lambda c: "rgb(%g,%g,%g)" % c)
def moderate_rgb(request):
    return RGB(request.param)


@pytest.fixture
def round_trip_rgb():
    return list(ROUND_TRIP_RGB)
