"""Link a guardian account to an adolescent account.

Guardian access requests are only granted when the adolescent's record in
the Adolescents collection names the guardian. Run after the adolescent
has given consent:

    python scripts/link_guardian.py <adolescent_id> <guardian_id>
"""
import sys

from teenhealth.core.firebase import get_db
from teenhealth.services.record_store import Collections, RecordStore, eq


def link_guardian(store: RecordStore, adolescent_id: str, guardian_id: str):
    return store.upsert(Collections.ADOLESCENTS, eq("userId", adolescent_id), {"guardianId": guardian_id})


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)

    adolescent_id, guardian_id = sys.argv[1], sys.argv[2]
    result = link_guardian(RecordStore(get_db()), adolescent_id, guardian_id)
    print(f"✅ Guardian {guardian_id} linked to adolescent {adolescent_id} ({result.outcome.value})")
