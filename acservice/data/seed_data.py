"""
Static seed data for the Patna AC service business.

Raw dictionaries only; ``DataStore.seeded()`` validates them into models
on every call so each store starts from an untouched copy.
"""

from typing import Any, TypedDict


class SlotCapacity(TypedDict):
    """Known capacity for one slot label on one date."""

    available: bool
    slots: int


SERVICES: list[dict[str, Any]] = [
    {
        "id": "ac-maintenance",
        "name": "AC Maintenance & Tune-Up",
        "description": "Complete AC servicing including filter cleaning, coil maintenance, and performance optimization",
        "price": {"min": 599, "max": 999, "currency": "INR"},
        "duration": 60,
        "category": "maintenance",
        "features": ["Filter Cleaning", "Coil Maintenance", "Performance Check", "6 Month Warranty"],
        "is_emergency": False,
        "available_for": ["window", "split", "tower", "portable"],
        "warranty": {"duration_days": 180, "coverage": "Service workmanship"},
    },
    {
        "id": "basic-ac-service",
        "name": "Basic AC Service",
        "description": "Quick check-up and filter wash for new units still running well",
        "price": {"min": 399, "currency": "INR"},
        "duration": 45,
        "category": "maintenance",
        "features": ["Filter Wash", "Cooling Check", "Drain Pipe Check"],
        "is_emergency": False,
        "available_for": ["window", "split", "portable"],
    },
    {
        "id": "gas-refilling",
        "name": "AC Gas Refilling",
        "description": "Professional refrigerant gas refilling and leak detection service",
        "price": {"min": 1299, "max": 2499, "currency": "INR"},
        "duration": 90,
        "category": "maintenance",
        "features": ["Leak Detection", "Quality Refrigerant", "Pressure Testing", "6 Month Warranty"],
        "is_emergency": False,
        "available_for": ["window", "split", "central", "cassette"],
        "warranty": {"duration_days": 180, "coverage": "Gas leakage from serviced joints"},
    },
    {
        "id": "amc-annual",
        "name": "Annual Maintenance Contract (AMC)",
        "description": "Four scheduled services a year with priority support and discounted repairs",
        "price": {"min": 4999, "currency": "INR"},
        "duration": 60,
        "category": "maintenance",
        "features": ["4 Services per Year", "Priority Support", "15% Off Repairs", "Free Gas Top-Up"],
        "is_emergency": False,
        "available_for": ["window", "split", "central", "cassette", "tower"],
        "warranty": {"duration_days": 365, "coverage": "All scheduled visits for one year"},
    },
    {
        "id": "ac-repair",
        "name": "AC Repair Service",
        "description": "Expert diagnosis and repair of all AC issues including cooling problems, electrical faults",
        "price": {"min": 499, "max": 2999, "currency": "INR"},
        "duration": 75,
        "category": "repair",
        "features": ["Free Diagnosis", "Genuine Parts", "Expert Technicians", "3 Month Warranty"],
        "is_emergency": False,
        "available_for": ["window", "split", "tower", "portable"],
        "warranty": {"duration_days": 90, "coverage": "Replaced parts and labour"},
    },
    {
        "id": "compressor-repair",
        "name": "Compressor Repair & Replacement",
        "description": "Compressor diagnosis, capacitor replacement and full compressor swap",
        "price": {"min": 2499, "max": 6999, "currency": "INR"},
        "duration": 180,
        "category": "repair",
        "features": ["Compressor Testing", "Capacitor Replacement", "Genuine Compressors"],
        "is_emergency": False,
        "available_for": ["window", "split", "central", "cassette"],
        "warranty": {"duration_days": 180, "coverage": "Compressor and fitting"},
    },
    {
        "id": "ac-installation",
        "name": "AC Installation",
        "description": "Professional installation of split, window, and central AC systems with warranty",
        "price": {"min": 1499, "max": 2499, "currency": "INR"},
        "duration": 180,
        "category": "installation",
        "features": ["Professional Installation", "Piping & Wiring", "Testing", "1 Year Warranty"],
        "is_emergency": False,
        "available_for": ["split"],
        "warranty": {"duration_days": 365, "coverage": "Installation workmanship"},
    },
    {
        "id": "window-installation",
        "name": "Window AC Installation",
        "description": "Window unit mounting, sealing and electrical hook-up",
        "price": {"min": 999, "currency": "INR"},
        "duration": 90,
        "category": "installation",
        "features": ["Frame Mounting", "Weather Sealing", "Testing"],
        "is_emergency": False,
        "available_for": ["window"],
    },
    {
        "id": "ac-uninstallation",
        "name": "AC Uninstallation & Shifting",
        "description": "Safe removal, gas pump-down and reinstallation at a new location",
        "price": {"min": 599, "max": 1999, "currency": "INR"},
        "duration": 120,
        "category": "installation",
        "features": ["Gas Pump-Down", "Safe Packing", "Reinstallation Available"],
        "is_emergency": False,
        "available_for": ["window", "split", "tower"],
    },
    {
        "id": "ac-cleaning",
        "name": "AC Deep Cleaning (Jet Pump)",
        "description": "Thorough cleaning of AC units including chemical wash and sanitization",
        "price": {"min": 799, "max": 1199, "currency": "INR"},
        "duration": 90,
        "category": "cleaning",
        "features": ["Chemical Wash", "Sanitization", "Filter Replacement", "Performance Boost"],
        "is_emergency": False,
        "available_for": ["window", "split", "cassette"],
    },
    {
        "id": "duct-cleaning",
        "name": "Central AC Duct Cleaning",
        "description": "Duct vacuuming and sanitization for central and cassette systems",
        "price": {"min": 2999, "currency": "INR"},
        "duration": 240,
        "category": "cleaning",
        "features": ["Duct Vacuuming", "Anti-Bacterial Fogging", "Air Quality Check"],
        "is_emergency": False,
        "available_for": ["central", "cassette"],
    },
    {
        "id": "emergency-service",
        "name": "24/7 Emergency Service",
        "description": "Round-the-clock emergency AC repair service across Patna",
        "price": {"min": 799, "max": 3999, "currency": "INR"},
        "duration": 60,
        "category": "emergency",
        "features": ["24/7 Availability", "Quick Response", "Same Day Service", "Emergency Support"],
        "is_emergency": True,
        "available_for": ["window", "split", "central", "cassette", "tower", "portable"],
    },
]

SERVICE_AREAS: list[dict[str, Any]] = [
    {"name": "Boring Road", "pincode": "800001", "landmarks": ["AN College"], "delivery_time": "30 minutes", "emergency_available": True, "additional_charge": 0},
    {"name": "Fraser Road", "pincode": "800001", "landmarks": ["Dak Bungalow Chowk"], "delivery_time": "30 minutes", "emergency_available": True, "additional_charge": 0},
    {"name": "Bailey Road", "pincode": "800014", "landmarks": ["Raja Bazar"], "delivery_time": "35 minutes", "emergency_available": True, "additional_charge": 0},
    {"name": "Kankarbagh", "pincode": "800020", "landmarks": ["Kankarbagh Colony More"], "delivery_time": "35 minutes", "emergency_available": True, "additional_charge": 0},
    {"name": "Kidwaipuri", "pincode": "800001", "landmarks": ["Kidwaipuri Park"], "delivery_time": "35 minutes", "emergency_available": True, "additional_charge": 0},
    {"name": "Digha", "pincode": "800011", "landmarks": ["Digha Ghat"], "delivery_time": "45 minutes", "emergency_available": True, "additional_charge": 50},
    {"name": "Patrakar Nagar", "pincode": "800020", "landmarks": ["Patrakar Nagar Thana"], "delivery_time": "45 minutes", "emergency_available": True, "additional_charge": 50},
    {"name": "Patliputra", "pincode": "800013", "landmarks": ["Patliputra Colony"], "delivery_time": "45 minutes", "emergency_available": True, "additional_charge": 50},
    {"name": "Rajendra Nagar", "pincode": "800016", "landmarks": ["Rajendra Nagar Terminal"], "delivery_time": "50 minutes", "emergency_available": True, "additional_charge": 100},
    {"name": "Danapur", "pincode": "801503", "landmarks": ["Danapur Cantonment"], "delivery_time": "60 minutes", "emergency_available": False, "additional_charge": 150},
]

TECHNICIANS: list[dict[str, Any]] = [
    {
        "id": "tech-001",
        "name": "Rajesh Kumar",
        "phone": "+91-9876543211",
        "email": "rajesh@acservicingpro.in",
        "specializations": ["installation", "repair", "maintenance"],
        "experience": 12,
        "certifications": ["HVAC Certification", "Refrigeration Expert", "Safety Training"],
        "rating": 4.9,
        "total_jobs": 1840,
        "available_areas": ["Boring Road", "Fraser Road", "Bailey Road", "Patliputra"],
        "working_hours": {"start": "09:00", "end": "18:00"},
        "is_available": True,
        "emergency_available": True,
    },
    {
        "id": "tech-002",
        "name": "Amit Singh",
        "phone": "+91-9876543212",
        "specializations": ["maintenance", "cleaning", "repair"],
        "experience": 8,
        "certifications": ["AC Repair Specialist", "Customer Service Excellence"],
        "rating": 4.8,
        "total_jobs": 1210,
        "available_areas": ["Kankarbagh", "Rajendra Nagar", "Boring Road"],
        "working_hours": {"start": "09:00", "end": "19:00"},
        "is_available": True,
        "emergency_available": False,
    },
    {
        "id": "tech-003",
        "name": "Sanjay Gupta",
        "phone": "+91-9876543214",
        "specializations": ["emergency", "repair", "cleaning"],
        "experience": 6,
        "certifications": ["Emergency Response", "AC Cleaning Specialist"],
        "rating": 4.8,
        "total_jobs": 960,
        "available_areas": ["Kankarbagh", "Danapur", "Digha", "Boring Road"],
        "working_hours": {"start": "08:00", "end": "20:00"},
        "is_available": True,
        "emergency_available": True,
    },
    {
        "id": "tech-004",
        "name": "Vikash Yadav",
        "phone": "+91-9876543215",
        "specializations": ["maintenance", "cleaning"],
        "experience": 4,
        "certifications": ["AC Cleaning Specialist"],
        "rating": 4.6,
        "total_jobs": 540,
        "available_areas": ["Danapur", "Digha", "Patliputra", "Kidwaipuri"],
        "working_hours": {"start": "09:00", "end": "18:00"},
        "is_available": True,
        "emergency_available": False,
    },
    {
        "id": "tech-005",
        "name": "Manish Raj",
        "phone": "+91-9876543216",
        "specializations": ["installation", "emergency", "repair"],
        "experience": 10,
        "certifications": ["HVAC Certification", "Electrical Safety"],
        "rating": 4.7,
        "total_jobs": 1505,
        "available_areas": ["Fraser Road", "Bailey Road", "Patrakar Nagar", "Kidwaipuri"],
        "working_hours": {"start": "10:00", "end": "19:00"},
        "is_available": False,
        "emergency_available": True,
    },
    {
        "id": "tech-006",
        "name": "Ravi Shankar",
        "phone": "+91-9876543217",
        "specializations": ["repair", "emergency"],
        "experience": 3,
        "certifications": ["Emergency Response"],
        "rating": 4.5,
        "total_jobs": 310,
        "available_areas": ["Rajendra Nagar", "Kankarbagh", "Patrakar Nagar"],
        "working_hours": {"start": "12:00", "end": "21:00"},
        "is_available": True,
        "emergency_available": True,
    },
]

TEAM_MEMBERS: list[dict[str, Any]] = [
    {
        "id": "team-1",
        "name": "Rajesh Kumar",
        "role": "Senior Technician",
        "experience": 12,
        "specializations": ["Split AC", "Central AC", "Installation"],
        "bio": "Senior technician with over 12 years of experience in AC installation and repair. Specializes in commercial HVAC systems and complex troubleshooting.",
        "certifications": ["HVAC Certification", "Refrigeration Expert", "Safety Training"],
        "contact_number": "+91-9876543211",
    },
    {
        "id": "team-2",
        "name": "Amit Singh",
        "role": "Technician",
        "experience": 8,
        "specializations": ["Window AC", "Split AC", "Maintenance"],
        "bio": "Expert in AC maintenance and repair with focus on residential services. Known for quick diagnostics and customer satisfaction.",
        "certifications": ["AC Repair Specialist", "Customer Service Excellence"],
        "contact_number": "+91-9876543212",
    },
    {
        "id": "team-3",
        "name": "Pradeep Sharma",
        "role": "Supervisor",
        "experience": 15,
        "specializations": ["All AC Types", "Team Management", "Quality Control"],
        "bio": "Operations supervisor ensuring quality standards and customer satisfaction across all service calls. Former HVAC engineer with extensive field experience.",
        "certifications": ["HVAC Engineer", "Quality Management", "Team Leadership"],
        "contact_number": "+91-9876543213",
    },
    {
        "id": "team-4",
        "name": "Sanjay Gupta",
        "role": "Technician",
        "experience": 6,
        "specializations": ["Emergency Repair", "Cleaning Services", "Split AC"],
        "bio": "Specialist in emergency AC repairs and deep cleaning services. Available for urgent service calls and known for quick problem resolution.",
        "certifications": ["Emergency Response", "AC Cleaning Specialist"],
        "contact_number": "+91-9876543214",
    },
]

CUSTOMERS: list[dict[str, Any]] = [
    {
        "id": "cust-001",
        "name": "Rohit Verma",
        "phone": "+91-9876543201",
        "email": "rohit.verma@email.com",
        "addresses": [
            {"id": "addr-001", "type": "home", "street": "12 Sri Krishna Puri", "area": "Boring Road", "pincode": "800001", "landmarks": ["Near AN College"], "is_default": True, "service_area": "Boring Road"},
            {"id": "addr-002", "type": "office", "street": "3rd Floor, Lok Nayak Bhawan", "area": "Fraser Road", "pincode": "800001", "is_default": False, "service_area": "Fraser Road"},
        ],
        "customer_type": "residential",
        "loyalty_points": 250,
        "total_bookings": 5,
        "created_at": "2023-04-12T10:30:00+05:30",
        "updated_at": "2024-01-15T09:00:00+05:30",
    },
    {
        "id": "cust-002",
        "name": "Neha Sinha",
        "phone": "+91-9876543202",
        "addresses": [
            {"id": "addr-003", "type": "home", "street": "H-45 Lohia Nagar", "area": "Kankarbagh", "pincode": "800020", "is_default": True, "service_area": "Kankarbagh"},
        ],
        "customer_type": "residential",
        "loyalty_points": 40,
        "total_bookings": 1,
        "created_at": "2023-11-02T16:20:00+05:30",
        "updated_at": "2023-11-02T16:20:00+05:30",
    },
    {
        "id": "cust-003",
        "name": "Patna Diagnostics Pvt Ltd",
        "phone": "+91-9876543203",
        "email": "facilities@patnadiagnostics.in",
        "alternate_phone": "+91-6122345678",
        "addresses": [
            {"id": "addr-004", "type": "office", "street": "Shivpuri Complex", "area": "Bailey Road", "pincode": "800014", "is_default": True, "service_area": "Bailey Road"},
            {"id": "addr-005", "type": "office", "street": "Road No. 2, Patliputra Colony", "area": "Patliputra", "pincode": "800013", "is_default": False, "service_area": "Patliputra"},
        ],
        "customer_type": "commercial",
        "loyalty_points": 820,
        "total_bookings": 14,
        "created_at": "2022-06-01T11:00:00+05:30",
        "updated_at": "2024-02-10T13:45:00+05:30",
    },
    {
        "id": "cust-004",
        "name": "Arvind Kumar",
        "phone": "+91-9876543204",
        "email": "arvind.k@email.com",
        "addresses": [
            {"id": "addr-006", "type": "home", "street": "Khagaul Road", "area": "Danapur", "pincode": "801503", "is_default": True, "service_area": "Danapur"},
        ],
        "customer_type": "residential",
        "loyalty_points": 120,
        "total_bookings": 3,
        "created_at": "2023-07-19T09:15:00+05:30",
        "updated_at": "2023-12-01T18:00:00+05:30",
    },
    {
        "id": "cust-005",
        "name": "Kavita Mishra",
        "phone": "+91-9876543205",
        "email": "kavita.mishra@email.com",
        "addresses": [
            {"id": "addr-007", "type": "home", "street": "Road No. 5, Rajendra Nagar", "area": "Rajendra Nagar", "pincode": "800016", "landmarks": ["Near Terminal"], "is_default": True, "service_area": "Rajendra Nagar"},
        ],
        "customer_type": "residential",
        "loyalty_points": 450,
        "total_bookings": 7,
        "created_at": "2023-01-05T12:00:00+05:30",
        "updated_at": "2024-01-20T10:10:00+05:30",
    },
]

_ROHIT_HOME = CUSTOMERS[0]["addresses"][0]
_NEHA_HOME = CUSTOMERS[1]["addresses"][0]
_DIAGNOSTICS_OFFICE = CUSTOMERS[2]["addresses"][0]
_ARVIND_HOME = CUSTOMERS[3]["addresses"][0]
_KAVITA_HOME = CUSTOMERS[4]["addresses"][0]

APPOINTMENTS: list[dict[str, Any]] = [
    {
        "id": "apt-001",
        "customer_id": "cust-001",
        "service_id": "ac-maintenance",
        "scheduled_at": "2024-03-01T10:00:00+05:30",
        "estimated_duration": 60,
        "status": "completed",
        "priority": "medium",
        "notes": "Annual pre-summer service",
        "technician_id": "tech-001",
        "ac_details": {"brand": "LG", "type": "split", "capacity": "1.5 Ton", "age": 2, "warranty_status": "out_of_warranty"},
        "address": _ROHIT_HOME,
        "pricing": {"estimated": 599, "actual": 599},
        "created_at": "2024-02-25T09:00:00+05:30",
        "updated_at": "2024-03-01T11:30:00+05:30",
    },
    {
        "id": "apt-002",
        "customer_id": "cust-002",
        "service_id": "ac-repair",
        "scheduled_at": "2024-03-02T12:00:00+05:30",
        "estimated_duration": 75,
        "status": "confirmed",
        "priority": "high",
        "notes": "AC not cooling properly",
        "technician_id": "tech-002",
        "ac_details": {"brand": "Voltas", "type": "window", "capacity": "1 Ton", "age": 5, "warranty_status": "out_of_warranty", "issues": ["Not cooling", "Noisy"]},
        "address": _NEHA_HOME,
        "pricing": {"estimated": 1200},
        "created_at": "2024-02-28T18:30:00+05:30",
        "updated_at": "2024-02-29T09:00:00+05:30",
    },
    {
        "id": "apt-003",
        "customer_id": "cust-003",
        "service_id": "duct-cleaning",
        "scheduled_at": "2024-03-05T15:00:00+05:30",
        "estimated_duration": 240,
        "status": "scheduled",
        "priority": "medium",
        "technician_id": "tech-001",
        "ac_details": {"brand": "Daikin", "model": "FCQ-100", "type": "cassette", "capacity": "3 Ton", "age": 4, "warranty_status": "extended_warranty"},
        "address": _DIAGNOSTICS_OFFICE,
        "pricing": {"estimated": 2999},
        "created_at": "2024-02-20T11:00:00+05:30",
        "updated_at": "2024-02-20T11:00:00+05:30",
    },
    {
        "id": "apt-004",
        "customer_id": "cust-004",
        "service_id": "emergency-service",
        "scheduled_at": "2024-02-18T21:00:00+05:30",
        "estimated_duration": 60,
        "status": "completed",
        "priority": "emergency",
        "notes": "Gas leak, unit tripping",
        "technician_id": "tech-003",
        "ac_details": {"brand": "Samsung", "type": "split", "capacity": "1.5 Ton", "age": 6, "warranty_status": "out_of_warranty", "issues": ["Gas leak"]},
        "address": _ARVIND_HOME,
        "pricing": {"estimated": 1099, "actual": 1450, "additional_charges": [{"description": "Refrigerant top-up", "amount": 351, "type": "parts"}]},
        "created_at": "2024-02-18T20:10:00+05:30",
        "updated_at": "2024-02-18T23:00:00+05:30",
    },
    {
        "id": "apt-005",
        "customer_id": "cust-005",
        "service_id": "gas-refilling",
        "scheduled_at": "2024-02-10T09:00:00+05:30",
        "estimated_duration": 90,
        "status": "cancelled",
        "priority": "medium",
        "notes": "Cancelled: customer travelling",
        "ac_details": {"brand": "Blue Star", "type": "split", "capacity": "2 Ton", "age": 3, "warranty_status": "in_warranty"},
        "address": _KAVITA_HOME,
        "pricing": {"estimated": 1299},
        "created_at": "2024-02-01T14:00:00+05:30",
        "updated_at": "2024-02-08T10:00:00+05:30",
    },
    {
        "id": "apt-006",
        "customer_id": "cust-001",
        "service_id": "ac-installation",
        "scheduled_at": "2024-03-08T09:00:00+05:30",
        "estimated_duration": 180,
        "status": "in_progress",
        "priority": "low",
        "notes": "New bedroom unit",
        "technician_id": "tech-001",
        "ac_details": {"brand": "Hitachi", "type": "split", "capacity": "1 Ton", "age": 0, "warranty_status": "in_warranty"},
        "address": _ROHIT_HOME,
        "pricing": {"estimated": 1499},
        "created_at": "2024-03-03T12:00:00+05:30",
        "updated_at": "2024-03-08T09:05:00+05:30",
    },
]

TESTIMONIALS: list[dict[str, Any]] = [
    {"id": "test-001", "customer_name": "Rajesh Kumar", "customer_area": "Boring Road", "service": "AC Maintenance", "rating": 5, "comment": "Excellent service! The technician was very professional and fixed my AC issue quickly. The cooling is much better now.", "date": "2024-01-15T00:00:00+05:30", "verified": True},
    {"id": "test-002", "customer_name": "Priya Singh", "customer_area": "Kankarbagh", "service": "AC Repair", "rating": 5, "comment": "They responded to my emergency call within 30 minutes and got my AC working perfectly. Great team!", "date": "2024-01-10T00:00:00+05:30", "verified": True},
    {"id": "test-003", "customer_name": "Amit Sharma", "customer_area": "Fraser Road", "service": "AC Installation", "rating": 4, "comment": "Professional installation of my new split AC. Skilled technicians and a neat job at a reasonable price.", "date": "2024-01-08T00:00:00+05:30", "verified": True},
    {"id": "test-004", "customer_name": "Sunita Devi", "customer_area": "Bailey Road", "service": "Deep Cleaning", "rating": 5, "comment": "The deep cleaning service was outstanding. My AC is running like new and the air quality has improved.", "date": "2024-01-05T00:00:00+05:30", "verified": True},
    {"id": "test-005", "customer_name": "Manoj Gupta", "customer_area": "Rajendra Nagar", "service": "Emergency Repair", "rating": 5, "comment": "Called during a hot summer evening and they came immediately. Fixed the gas leak professionally.", "date": "2024-01-03T00:00:00+05:30", "verified": True},
    {"id": "test-006", "customer_name": "Deepika Kumari", "customer_area": "Patliputra", "service": "AC Maintenance", "rating": 4, "comment": "Good maintenance service. The technician explained everything clearly and gave helpful tips for AC care.", "date": "2024-01-01T00:00:00+05:30", "verified": True},
    {"id": "test-007", "customer_name": "Suresh Prasad", "customer_area": "Boring Road", "service": "AC Repair", "rating": 5, "comment": "Diagnosed a faulty capacitor in minutes and replaced it the same day.", "date": "2023-12-20T00:00:00+05:30", "verified": True},
    {"id": "test-008", "customer_name": "Anjali Roy", "customer_area": "Danapur", "service": "AC Gas Refilling", "rating": 3, "comment": "Work was fine but the technician arrived an hour late.", "date": "2023-12-12T00:00:00+05:30", "verified": True},
    {"id": "test-009", "customer_name": "Vivek Anand", "customer_area": "Kankarbagh", "service": "AC Installation", "rating": 4, "comment": "Window AC installed neatly, cleaned up afterwards too.", "date": "2024-02-02T00:00:00+05:30", "verified": False},
    {"id": "test-010", "customer_name": "Pooja Jha", "customer_area": "Digha", "service": "AC Repair", "rating": 2, "comment": "Issue came back after a week, had to call again.", "date": "2024-02-05T00:00:00+05:30", "verified": False},
]

TIME_SLOTS: list[dict[str, str]] = [
    {"start": "09:00", "end": "12:00", "label": "Morning"},
    {"start": "12:00", "end": "15:00", "label": "Afternoon"},
    {"start": "15:00", "end": "18:00", "label": "Evening"},
    {"start": "18:00", "end": "21:00", "label": "Night"},
]

EMERGENCY_TIME_SLOTS: list[dict[str, str]] = [
    {"start": "06:00", "end": "09:00", "label": "Early Morning"},
    *TIME_SLOTS,
    {"start": "21:00", "end": "00:00", "label": "Late Night"},
]

BOOKING_AVAILABILITY: dict[str, dict[str, SlotCapacity]] = {
    "2024-03-01": {
        "Morning": {"available": True, "slots": 2},
        "Afternoon": {"available": True, "slots": 1},
        "Evening": {"available": False, "slots": 0},
        "Night": {"available": False, "slots": 0},
    },
    "2024-03-02": {
        "Morning": {"available": True, "slots": 3},
        "Afternoon": {"available": True, "slots": 3},
        "Evening": {"available": True, "slots": 2},
        "Night": {"available": False, "slots": 0},
    },
    "2024-03-05": {
        "Morning": {"available": False, "slots": 0},
        "Afternoon": {"available": False, "slots": 0},
        "Evening": {"available": True, "slots": 1},
        "Night": {"available": True, "slots": 1},
        "Late Night": {"available": True, "slots": 1},
    },
}
