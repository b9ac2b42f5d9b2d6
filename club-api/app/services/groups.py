"""
Training groups: skill tier x discipline, numbered 1..12.

Both lookups are total. Unknown ids or names fall back to group 1 so that
an odd value on an athlete never breaks a roster render.
"""

DEFAULT_GROUP_ID = 1

GROUPS: dict[int, str] = {
    1: "Elite Sprinters",
    2: "Intermediate Sprinters",
    3: "Beginner Sprinters",
    4: "Elite Distance",
    5: "Intermediate Distance",
    6: "Beginner Distance",
    7: "Elite Throwers",
    8: "Intermediate Throwers",
    9: "Beginner Throwers",
    10: "Elite Jumpers",
    11: "Intermediate Jumpers",
    12: "Beginner Jumpers",
}

GROUP_IDS: dict[str, int] = {name: group_id for group_id, name in GROUPS.items()}


def get_group_name(group_id) -> str:
    try:
        key = int(group_id)
    except (TypeError, ValueError):
        key = DEFAULT_GROUP_ID
    return GROUPS.get(key, GROUPS[DEFAULT_GROUP_ID])


def get_group_id(group_name) -> int:
    if not isinstance(group_name, str):
        return DEFAULT_GROUP_ID
    return GROUP_IDS.get(group_name.strip(), DEFAULT_GROUP_ID)


def list_groups() -> list[str]:
    return [GROUPS[k] for k in sorted(GROUPS)]
