"""Fixed Hyderabad station list served by the mock backend."""

from vibrovolt.domain.models.station import Station, VehicleCategory

_2W = VehicleCategory.TWO_WHEELER
_3W = VehicleCategory.THREE_WHEELER
_CAR = VehicleCategory.CAR
_SUV = VehicleCategory.SUV
_BUS = VehicleCategory.BUS

HYDERABAD_STATIONS: tuple[Station, ...] = (
    Station(
        id="1",
        name="Hitech City Super Charger",
        address="HITEC City, Madhapur",
        latitude=17.4485,
        longitude=78.3908,
        distance="2.3 km",
        type="DC Fast",
        price=15,
        available=3,
        total=6,
        rating=4.8,
        on_demand=True,
        supported_vehicles=frozenset({_2W, _3W, _CAR, _SUV}),
        city="Hyderabad",
    ),
    Station(
        id="2",
        name="Gachibowli Financial District",
        address="Financial District, Gachibowli",
        latitude=17.4239,
        longitude=78.3480,
        distance="3.1 km",
        type="AC Fast",
        price=12,
        available=2,
        total=4,
        rating=4.6,
        on_demand=False,
        supported_vehicles=frozenset({_CAR, _SUV}),
        city="Hyderabad",
    ),
    Station(
        id="3",
        name="Banjara Hills Premium",
        address="Road No. 12, Banjara Hills",
        latitude=17.4126,
        longitude=78.4486,
        distance="4.2 km",
        type="DC Fast",
        price=18,
        available=1,
        total=3,
        rating=4.9,
        on_demand=True,
        supported_vehicles=frozenset({_2W, _CAR, _SUV, _BUS}),
        city="Hyderabad",
    ),
    Station(
        id="4",
        name="Charminar Heritage Hub",
        address="Charminar, Old City",
        latitude=17.3616,
        longitude=78.4747,
        distance="8.5 km",
        type="AC Standard",
        price=10,
        available=4,
        total=8,
        rating=4.3,
        on_demand=False,
        supported_vehicles=frozenset({_2W, _3W, _CAR}),
        city="Hyderabad",
    ),
    Station(
        id="5",
        name="Shamshabad RGIA Airport",
        address="Rajiv Gandhi International Airport",
        latitude=17.2403,
        longitude=78.4294,
        distance="25.8 km",
        type="DC Ultra Fast",
        price=22,
        available=6,
        total=12,
        rating=4.7,
        on_demand=True,
        supported_vehicles=frozenset({_CAR, _SUV, _BUS}),
        city="Hyderabad",
    ),
    Station(
        id="6",
        name="Kondapur IT Hub",
        address="Kondapur, IT Corridor",
        latitude=17.4647,
        longitude=78.3639,
        distance="1.8 km",
        type="DC Fast",
        price=16,
        available=0,
        total=4,
        rating=4.5,
        on_demand=True,
        supported_vehicles=frozenset({_2W, _CAR, _SUV}),
        city="Hyderabad",
    ),
)
