
TIER_LABELS = {
    "HIGH": "Likely Scam",
    "MEDIUM": "Suspicious",
    "LOW": "Appears Safe",
}

RECOMMENDATIONS = {
    "HIGH": "Do not respond or click any links. Delete this message immediately.",
    "MEDIUM": "Be very cautious. Verify sender through official channels before taking any action.",
    "LOW": "Message appears legitimate, but always stay vigilant.",
}

# Streamlit markdown colour names
TIER_COLORS = {
    "HIGH": "red",
    "MEDIUM": "orange",
    "LOW": "green",
}

SAFETY_TIPS = [
    ("🚨", "Urgency Tactics", "Scammers create false urgency to pressure quick decisions"),
    ("💰", "Money Requests", "Legitimate organizations don't ask for money via text/email"),
    ("🔗", "Suspicious Links", "Never click links from unknown senders"),
    ("📝", "Personal Info", "Never share passwords, SSN, or banking details"),
]


def headline_for(tier: str) -> str:
    if tier not in TIER_LABELS:
        raise KeyError(f"Unknown risk tier: {tier}")
    return f"{tier} RISK - {TIER_LABELS[tier]}"
