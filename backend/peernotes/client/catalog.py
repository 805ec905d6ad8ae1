"""Subjects and tags known to the client. The server stores whatever it is sent."""

SUBJECT_NAMES = {
    "CS333": "Data Analytics",
    "CS351L": "Software Engineering Laboratory",
    "CS352": "Software Engineering Lecture",
    "CS373": "Parallel and Distributed Computing",
    "CSE1": "Cybersecurity",
    "CSE2": "Project Management",
    "CC311L": "Web Development Laboratory",
    "CC312": "Web Development Lecture",
    "CS313": "Information Assurance and Security",
}
SUBJECTS = list(SUBJECT_NAMES)

ALL = "All"
TAGS = ["Quiz", "Lesson 1", "Lesson 2", "Midterms", "Finals"]

SORT_POPULAR = "popular"
SORT_NEWEST = "newest"
SORT_MODES = (SORT_POPULAR, SORT_NEWEST)


def subject_filters() -> list:
    return [ALL] + SUBJECTS


def tag_filters() -> list:
    return [ALL] + TAGS
