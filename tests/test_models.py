from moodjournal.models import Category, JournalEntry, MediaItem, Mood, WeeklyMoodData


def test_mood_from_label_known():
    assert Mood.from_label("happy") is Mood.HAPPY
    assert Mood.from_label(Mood.SAD) is Mood.SAD


def test_mood_from_label_falls_back_to_unrecognized():
    for label in ("", None, "Happy", "grumpy", 7):
        assert Mood.from_label(label) is Mood.UNRECOGNIZED


def test_category_from_label():
    assert Category.from_label("personal") is Category.PERSONAL
    assert Category.from_label("professional") is Category.PROFESSIONAL
    assert Category.from_label("other") is None
    assert Category.from_label(None) is None


def test_journal_entry_from_api():
    payload = {
        "_id": "abc",
        "title": "Standup",
        "content": "Went fine",
        "mood": "calm",
        "tags": ["work"],
        "category": "professional",
        "isProtected": True,
        "media": [{"_id": "m1", "type": "image", "url": "https://example.com/a.png"}],
        "createdAt": "2024-06-04T09:00:00",
        "updatedAt": "2024-06-04T09:05:00",
    }
    entry = JournalEntry.from_api(payload)
    assert entry.id == "abc"
    assert entry.mood == "calm"
    assert entry.category == "professional"
    assert entry.is_protected is True
    assert entry.tags == ("work",)
    assert entry.location is None
    assert entry.media == (MediaItem(id="m1", type="image", url="https://example.com/a.png"),)
    assert entry.created_at == "2024-06-04T09:00:00"


def test_journal_entry_from_sparse_payload():
    entry = JournalEntry.from_api({"createdAt": "2024-06-04"})
    assert entry.mood == ""
    assert entry.category == ""
    assert entry.media == ()
    assert entry.is_protected is False


def test_weekly_mood_data_for_category():
    data = WeeklyMoodData(professional_mood=(1.0,) * 7, personal_mood=(2.0,) * 7)
    assert data.for_category(Category.PROFESSIONAL) == (1.0,) * 7
    assert data.for_category(Category.PERSONAL) == (2.0,) * 7
    assert data.days == ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def test_from_api_drops_malformed_media_and_tags():
    entry = JournalEntry.from_api({
        "createdAt": "2024-06-05T10:00:00",
        "mood": "happy",
        "category": "personal",
        "tags": 3,
        "media": ["https://example.com/a.png", {"_id": "m1", "type": "audio", "url": "u"}],
    })
    assert entry.tags == ()
    assert entry.media == (MediaItem(id="m1", type="audio", url="u"),)
    assert JournalEntry.from_api({"media": "https://example.com/a.png"}).media == ()
