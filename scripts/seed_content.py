from teenhealth.core.firebase import get_db
from teenhealth.services.record_store import Collections, RecordStore, eq

blog_posts = [
    {"postId": "sleep-basics", "title": "Why teens need more sleep", "body": "Most teenagers need 8 to 10 hours of sleep a night."},
    {"postId": "hydration", "title": "Staying hydrated at school", "body": "Carry a water bottle and refill it between classes."},
]

programs = [
    {"programId": "move-more", "title": "Move More Challenge", "type": "visitor"},
    {"programId": "sleep-reset", "title": "Four-week Sleep Reset", "type": "participant"},
]

resources = [
    {"title": "Talking about stress", "kind": "article"},
    {"title": "Five-minute breathing exercise", "kind": "video"},
]


def seed(store: RecordStore):
    # (collection, key field, documents)
    seeds = [
        (Collections.BLOG_POSTS, "postId", blog_posts),
        (Collections.HEALTH_PROGRAMS, "programId", programs),
        (Collections.MENTAL_HEALTH_RESOURCES, "title", resources),
    ]
    added = 0
    for collection, key, docs in seeds:
        for doc in docs:
            # Check if exists to avoid dupes
            if store.exists(collection, eq(key, doc[key])):
                print(f"Skipped {collection}/{doc[key]} (Exists)")
                continue
            store.insert(collection, doc)
            print(f"Added {collection}/{doc[key]}")
            added += 1
    return added


if __name__ == "__main__":
    seed(RecordStore(get_db()))
