"""Minimal example for the nested dictionary helpers."""

from dict_crutches import fetch_path, fetch_path_strict, filter_dict, get_path, reject_dict, remap_keys


def main() -> None:
    """Run remap, lookup and selection on a small nested profile."""
    profile = {"user": {"name": "alice", "email": None}, "counts": {"followed_by": 5951762}}

    print("upper:", remap_keys(profile, str.upper))
    print("followers:", get_path(profile, "counts.followed_by"))
    print("missing:", get_path(profile, "counts.following", "n/a"))
    print("fetch:", fetch_path(profile, "user.age"))
    print("strict:", fetch_path_strict(profile, "user.name"))

    user = profile["user"]
    print("set fields:", filter_dict(user, lambda _key, value: value is not None))
    print("unset fields:", reject_dict(user, lambda _key, value: value is not None))


if __name__ == "__main__":
    main()
