from __future__ import annotations

from app.domain.entities.service_catalog import ServiceEntry, SubService, Technician


SERVICES: dict[str, ServiceEntry] = {
    "svc-plumbing": ServiceEntry(
        id="svc-plumbing",
        title="Plumbing Services",
        description="Professional leak detection, fixing, and pipe maintenance for your home",
        icon="🔧",
        category="plumbing",
        price="₹499 onwards",
        border_color="#3b82f6",
        subservices=(
            SubService("Leak Detection & Repair", "Identify and fix water leaks quickly", "₹499", "1-2 hours"),
            SubService("Pipe Installation", "New pipe fitting and installation", "₹799", "2-3 hours"),
            SubService("Drain Cleaning", "Clear blocked drains and pipes", "₹599", "1 hour"),
            SubService("Tap & Faucet Repair", "Fix dripping taps and faucets", "₹399", "30 mins"),
        ),
    ),
    "svc-electrical": ServiceEntry(
        id="svc-electrical",
        title="Electrical Services",
        description="Complete electrical repairs and safety inspections by certified electricians",
        icon="⚡",
        category="electrical",
        price="₹599 onwards",
        border_color="#8b5cf6",
        subservices=(
            SubService("Wiring Repair", "Fix faulty electrical wiring safely", "₹699", "2-3 hours"),
            SubService("Switch Installation", "Install new switches and outlets", "₹599", "1 hour"),
            SubService("Fan Installation", "Install ceiling and wall fans", "₹799", "1-2 hours"),
            SubService("Safety Inspection", "Complete electrical safety check", "₹1299", "2-3 hours"),
        ),
    ),
    "svc-cleaning": ServiceEntry(
        id="svc-cleaning",
        title="Cleaning Services",
        description="Deep cleaning solutions using eco-friendly products",
        icon="🧹",
        category="cleaning",
        price="₹399 onwards",
        border_color="#10b981",
        subservices=(
            SubService("Deep Home Cleaning", "Thorough cleaning of entire home", "₹1299", "4-5 hours"),
            SubService("Kitchen Cleaning", "Complete kitchen sanitization", "₹799", "2-3 hours"),
            SubService("Bathroom Cleaning", "Deep bathroom cleaning", "₹599", "1-2 hours"),
        ),
    ),
    "svc-painting": ServiceEntry(
        id="svc-painting",
        title="Painting Services",
        description="Interior and exterior painting with premium quality paints",
        icon="🎨",
        category="painting",
        price="₹899 onwards",
        border_color="#ef4444",
        subservices=(
            SubService("Interior Painting", "Paint interior walls professionally", "₹899", "1 day"),
            SubService("Exterior Painting", "Weather-resistant exterior painting", "₹1299", "2 days"),
            SubService("Texture Painting", "Decorative texture painting", "₹1599", "2 days"),
        ),
    ),
    "svc-carpentry": ServiceEntry(
        id="svc-carpentry",
        title="Carpentry Services",
        description="Custom carpentry work, furniture assembly, and repairs",
        icon="🔨",
        category="carpentry",
        price="₹699 onwards",
        border_color="#f59e0b",
        subservices=(
            SubService("Furniture Assembly", "Assemble new furniture items", "₹699", "1-2 hours"),
            SubService("Door Repair", "Fix door hinges and locks", "₹799", "1-2 hours"),
            SubService("Custom Furniture", "Build custom furniture pieces", "₹2999", "3-5 days"),
        ),
    ),
    "svc-ac": ServiceEntry(
        id="svc-ac",
        title="AC Repair & Maintenance",
        description="Air conditioning installation, repair, and maintenance",
        icon="❄️",
        category="ac",
        price="₹499 onwards",
        border_color="#06b6d4",
        subservices=(
            SubService("AC Service", "Complete AC cleaning and gas check", "₹499", "1 hour"),
            SubService("AC Installation", "Install new air conditioner", "₹1999", "2-3 hours"),
            SubService("AC Repair", "Fix cooling and other issues", "₹799", "1-2 hours"),
        ),
    ),
}


TECHNICIANS: dict[str, Technician] = {
    "tech-001": Technician("tech-001", "Ramesh Kumar", "plumbing", experience_years=8, rating=4.7, phone="+91-9800000001"),
    "tech-002": Technician("tech-002", "Suresh Patel", "electrical", experience_years=6, rating=4.6, phone="+91-9800000002"),
    "tech-003": Technician("tech-003", "Anita Sharma", "cleaning", experience_years=4, rating=4.8, phone="+91-9800000003"),
    "tech-004": Technician("tech-004", "Vikram Singh", "painting", experience_years=10, rating=4.5, phone="+91-9800000004"),
    "tech-005": Technician("tech-005", "Imran Khan", "carpentry", experience_years=12, rating=4.9, phone="+91-9800000005"),
    "tech-006": Technician("tech-006", "Deepak Rao", "ac", experience_years=5, rating=4.4, phone="+91-9800000006"),
    "tech-007": Technician("tech-007", "Meena Iyer", "electrical", experience_years=3, rating=4.3, phone="+91-9800000007"),
}
