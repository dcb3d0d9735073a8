"""
Static application guidance: deadline calendar and resource directory.
"""

from typing import Dict, List

DEADLINE_GUIDE: Dict[str, str] = {
    "universities": "Most public universities open 1 April and close 30 September. Medicine and Architecture often close earlier (June/July).",
    "tvet_colleges": "TVET colleges run by trimester or semester. Trimester 1: apply Sept-Nov for next year. Trimester 2: apply March/April. Trimester 3: apply July/August.",
    "financial_aid": "NSFAS opens Oct/Nov and closes Jan/Feb. Bursary dates vary widely.",
    "private_colleges": "Private colleges generally accept late applications until February.",
}

SPECIFIC_CLOSING_DATES: Dict[str, str] = {
    "University of Cape Town (UCT)": "31 July (Undergrad)",
    "University of the Witwatersrand (Wits)": "30 September",
    "University of Pretoria (UP)": "30 June (Selection programmes), 30 Sept (others)",
    "Stellenbosch University": "31 July",
    "University of KwaZulu-Natal (UKZN)": "30 September",
    "University of Johannesburg (UJ)": "30 September (12pm)",
    "Rosebank College": "Open until Feb",
    "Boston City Campus": "Open all year",
    "Richfield": "Open until Feb",
}

RESOURCES: List[Dict] = [
    {
        "category": "Central Applications",
        "items": [
            {"name": "CAO", "description": "Central Application Office", "url": "https://www.cao.ac.za"},
        ],
    },
    {
        "category": "Government Funding",
        "items": [
            {"name": "NSFAS", "description": "National Student Financial Aid Scheme", "url": "https://www.nsfas.org.za"},
        ],
    },
]
