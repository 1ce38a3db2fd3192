"""Read-only word lists used by the log parser and the sentiment scorer."""

from socialq.domain.people import InteractionType

# Words that look like names when capitalized but are not. Compared lower-cased.
STOPWORDS = frozenset(
    word.lower()
    for word in (
        # Pronouns, articles and auxiliaries that start sentences
        "I", "The", "A", "An", "My", "We", "It", "He", "She", "They",
        "This", "That", "These", "Those", "There", "Here", "Just", "Got",
        "Had", "Was", "Were", "Been", "Have", "Has", "Did", "Does", "Do",
        "Can", "Could", "Would", "Should", "Will", "May", "Might",
        "Some", "All", "Any", "No", "Not", "But", "And", "Or", "So",
        "Very", "Really", "Also", "After", "Before", "During", "About",
        # Temporal words
        "Today", "Yesterday", "Tomorrow", "Tonight", "Last", "Next",
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
        "January", "February", "March", "April", "June",
        "July", "August", "September", "October", "November", "December",
        "Morning", "Afternoon", "Evening", "Night", "Noon", "Weekend",
        # Interaction verbs and nouns
        "Met", "Called", "Texted", "Emailed", "Messaged", "Talked",
        "Went", "Saw", "Hung", "Caught", "Grabbed", "Quick",
        "Coffee", "Lunch", "Dinner", "Breakfast", "Drinks", "Meeting",
        "Zoom", "FaceTime", "Skype", "Teams",
        # Prepositions and filler
        "At", "In", "On", "For", "With", "From", "To", "Up",
        "Out", "Over", "Then", "When", "Where", "How", "What",
        "Who", "Why", "Now", "Still", "Already", "Again",
    )
)

# Checked in order, first group with a keyword in the text wins. In-person goes last
# because its keywords are broad enough to shadow the more specific channels.
TYPE_KEYWORDS: tuple[tuple[InteractionType, tuple[str, ...]], ...] = (
    ("call", ("called", "call", "phone", "rang", "dialed", "phoned")),
    (
        "text",
        ("texted", "text", "sms", "messaged", "message", "imessage", "whatsapp", "dm", "dmed"),
    ),
    ("video", ("zoom", "facetime", "video", "skype", "teams", "google meet", "webex")),
    ("email", ("emailed", "email", "e-mail", "mailed")),
    (
        "social-media",
        (
            "instagram", "twitter", "facebook", "snapchat", "tiktok", "linkedin",
            "posted", "commented", "liked", "tagged",
        ),
    ),
    (
        "in-person",
        (
            "met", "saw", "coffee", "lunch", "dinner", "breakfast", "drinks",
            "hung out", "hangout", "hang out", "grabbed", "went to", "walked",
            "ran into", "bumped into", "visited", "party", "event", "concert",
            "movie", "gym", "workout", "hike", "trip", "meeting", "in person",
        ),
    ),
)

POSITIVE_WORDS = frozenset(
    (
        "happy", "great", "good", "amazing", "wonderful", "excellent", "fantastic",
        "love", "loved", "fun", "perfect", "awesome", "enjoy", "enjoyed", "enjoying",
        "glad", "thrilled", "excited", "pleased", "proud", "grateful", "thankful",
        "laugh", "laughed", "smile", "smiled", "joy", "joyful", "better", "best",
        "nice", "beautiful", "brilliant", "outstanding", "warm", "kind", "lovely",
        "delightful", "productive", "successful", "accomplished", "celebrate",
        "reconnect", "reconnected", "connected", "supportive", "uplifting",
    )
)

NEGATIVE_WORDS = frozenset(
    (
        "sad", "bad", "awful", "terrible", "horrible", "poor",
        "hate", "hated", "angry", "frustrated", "frustration", "annoyed",
        "disappointed", "disappointing", "failed", "failure", "depressed", "anxious",
        "anxiety", "stressed", "stress", "difficult", "struggle", "struggling",
        "pain", "painful", "worst", "boring", "bored", "lonely", "hurt", "hurting",
        "upset", "worried", "trouble", "unhappy", "regret", "awkward", "uncomfortable",
        "argument", "fight", "disagreement", "missed", "distant", "cold",
    )
)
