# equipment_search/sources/catalog.py
"""Sample listings served by the catalog fallback, keyed by source id.

``make``/``model``/``year``/``category`` are defaults: the fallback replaces
them with the caller's values when the query carries them. ``kind`` is the
machine type appended to the title.
"""

_IMG = "https://images.unsplash.com/{}?auto=format&fit=crop&w=1000&q=80"

SAMPLE_LISTINGS: dict[str, list[dict]] = {
    "equipment-watch": [
        {
            "id": "ew-1",
            "kind": "Excavator",
            "description": "Hydraulic excavator in excellent condition with low hours.",
            "price": 85000,
            "year": "2019",
            "make": "CAT",
            "model": "320D L",
            "category": "Excavators",
            "condition": "Excellent",
            "location": "Dallas, TX",
            "images": [_IMG.format("photo-1581578731548-c64695cc6952")],
            "specifications": {
                "Engine": "Cat C6.6 ACERT",
                "Net Power": "148 hp",
                "Operating Weight": "50,927 lb",
                "Max Digging Depth": "23 ft 6 in",
                "Max Reach": "32 ft 10 in",
                "Bucket Capacity": "1.5 cu yd",
            },
        },
        {
            "id": "ew-2",
            "kind": "Backhoe Loader",
            "description": "Versatile backhoe loader with 4x4 capability and extendable dipper.",
            "price": 65000,
            "year": "2020",
            "make": "John Deere",
            "model": "310SL",
            "category": "Backhoe Loaders",
            "condition": "Good",
            "location": "Chicago, IL",
            "images": [_IMG.format("photo-1504307651254-35680f356dfd")],
            "specifications": {
                "Engine": "John Deere PowerTech",
                "Net Power": "110 hp",
                "Operating Weight": "15,700 lb",
                "Dig Depth": "14 ft 11 in",
                "Loader Capacity": "1.3 cu yd",
                "Backhoe Bucket Capacity": "0.3 cu yd",
            },
        },
    ],
    "mascus": [
        {
            "id": "mascus-1",
            "kind": "Excavator",
            "description": "Well-maintained crawler excavator with low hours and recent service.",
            "price": 92000,
            "year": "2018",
            "make": "Volvo",
            "model": "EC220DL",
            "category": "Excavators",
            "condition": "Good",
            "location": "Atlanta, GA",
            "images": [_IMG.format("photo-1541625602330-2277a4c46182")],
            "specifications": {
                "Engine": "Volvo D6",
                "Net Power": "172 hp",
                "Operating Weight": "22,100 kg",
                "Max Digging Depth": "6,730 mm",
                "Max Reach": "9,900 mm",
                "Bucket Capacity": "1.2 m³",
            },
        },
        {
            "id": "mascus-2",
            "kind": "Hydraulic Excavator",
            "description": "Reliable hydraulic excavator with good undercarriage and hydraulics.",
            "price": 78000,
            "year": "2017",
            "make": "Komatsu",
            "model": "PC200",
            "category": "Excavators",
            "condition": "Fair",
            "location": "Miami, FL",
            "images": [_IMG.format("photo-1566576721346-d4a3b4eaeb55")],
            "specifications": {
                "Engine": "Komatsu SAA6D107E-1",
                "Net Power": "155 hp",
                "Operating Weight": "20,500 kg",
                "Max Digging Depth": "6,620 mm",
                "Max Reach": "9,875 mm",
                "Bucket Capacity": "1.1 m³",
            },
        },
    ],
    "machinery-trader": [
        {
            "id": "mt-1",
            "kind": "Skid Steer Loader",
            "description": "Compact skid steer loader with enclosed cab, AC, and auxiliary hydraulics.",
            "price": 35000,
            "year": "2019",
            "make": "Bobcat",
            "model": "S650",
            "category": "Skid Steers",
            "condition": "Excellent",
            "location": "Denver, CO",
            "images": [_IMG.format("photo-1578683010236-d716f9a3f461")],
            "specifications": {
                "Engine": "Bobcat Diesel",
                "Net Power": "74 hp",
                "Operating Weight": "8,327 lb",
                "Rated Operating Capacity": "2,690 lb",
                "Tipping Load": "5,380 lb",
                "Height to Hinge Pin": "10 ft 6 in",
            },
        },
        {
            "id": "mt-2",
            "kind": "Backhoe Loader",
            "description": "Versatile backhoe loader with 4x4, extendable dipper, and multiple attachments.",
            "price": 58000,
            "year": "2020",
            "make": "JCB",
            "model": "3CX",
            "category": "Backhoe Loaders",
            "condition": "Good",
            "location": "Phoenix, AZ",
            "images": [_IMG.format("photo-1566224425427-998503a013f6")],
            "specifications": {
                "Engine": "JCB EcoMAX",
                "Net Power": "109 hp",
                "Operating Weight": "17,196 lb",
                "Max Dig Depth": "14 ft 7 in",
                "Loader Bucket Capacity": "1.4 cu yd",
                "Backhoe Bucket Width": "24 in",
            },
        },
    ],
    "iron-planet": [
        {
            "id": "ip-1",
            "kind": "Dozer",
            "description": "Low hour dozer with VPAT blade, rear ripper, and enclosed cab with AC.",
            "price": 145000,
            "year": "2018",
            "make": "Caterpillar",
            "model": "D6T",
            "category": "Dozers",
            "condition": "Excellent",
            "location": "Houston, TX",
            "images": [_IMG.format("photo-1579412690850-bd41cd0af56c")],
            "specifications": {
                "Engine": "Cat C9.3 ACERT",
                "Net Power": "215 hp",
                "Operating Weight": "45,000 lb",
                "Blade Capacity": "5.7 cu yd",
                "Undercarriage": "90% remaining",
                "Ripper Type": "3-shank parallelogram",
            },
        },
        {
            "id": "ip-2",
            "kind": "Wheel Loader",
            "description": "Front end loader with GP bucket, good tires, and well-maintained.",
            "price": 88000,
            "year": "2019",
            "make": "Komatsu",
            "model": "WA380",
            "category": "Wheel Loaders",
            "condition": "Good",
            "location": "Seattle, WA",
            "images": [_IMG.format("photo-1506843223631-b1b5d7c36d5b")],
            "specifications": {
                "Engine": "Komatsu SAA6D107E-3",
                "Net Power": "191 hp",
                "Operating Weight": "39,900 lb",
                "Bucket Capacity": "4.3 cu yd",
                "Breakout Force": "35,270 lb",
                "Tires": "23.5R25, 70% remaining",
            },
        },
    ],
}
