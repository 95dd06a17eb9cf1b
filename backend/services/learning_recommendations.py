"""Curated learning resources for skills a candidate is missing."""

import logging
from urllib.parse import quote

from models.schemas.skill_gap import LearningResource, SkillRecommendation

logger = logging.getLogger(__name__)


def _r(title: str, platform: str, url: str, type_: str, free: bool) -> LearningResource:
    return LearningResource(title=title, platform=platform, url=url, type=type_, free=free)


# Keys are normalized (lowercase) skill names. Partial lookups walk this
# mapping in insertion order, so more specific keys must come first.
SKILL_RESOURCES: dict[str, list[LearningResource]] = {
    # Frontend
    "react native": [
        _r("React Native - The Practical Guide", "Udemy", "https://www.udemy.com/course/react-native-the-practical-guide/", "Course", False),
        _r("React Native Crash Course", "YouTube", "https://www.youtube.com/watch?v=0-S5a0eXPoc", "Video", True),
    ],
    "react": [
        _r("React - The Complete Guide", "Udemy", "https://www.udemy.com/course/react-the-complete-guide/", "Course", False),
        _r("React Full Course", "YouTube", "https://www.youtube.com/watch?v=SqcY0GlETPk", "Video", True),
        _r("React Documentation", "Documentation", "https://react.dev/learn", "Docs", True),
    ],
    "typescript": [
        _r("TypeScript for Professionals", "Udemy", "https://www.udemy.com/course/typescript-course/", "Course", False),
        _r("TypeScript Full Course", "YouTube", "https://www.youtube.com/watch?v=30LWjhZzg50", "Video", True),
        _r("TypeScript Handbook", "Documentation", "https://www.typescriptlang.org/docs/handbook/", "Docs", True),
    ],
    "javascript": [
        _r("JavaScript Algorithms and Data Structures", "FreeCodeCamp", "https://www.freecodecamp.org/learn/javascript-algorithms-and-data-structures/", "Course", True),
        _r("JavaScript - The Complete Guide", "Udemy", "https://www.udemy.com/course/javascript-the-complete-guide-2020-beginner-advanced/", "Course", False),
    ],
    "css": [
        _r("CSS - The Complete Guide", "Udemy", "https://www.udemy.com/course/css-the-complete-guide-incl-flexbox-grid-sass/", "Course", False),
        _r("CSS Crash Course", "YouTube", "https://www.youtube.com/watch?v=yfoY53QXEnI", "Video", True),
    ],
    "html": [
        _r("HTML5 Crash Course", "YouTube", "https://www.youtube.com/watch?v=UB1O30fR-EE", "Video", True),
        _r("Responsive Web Design", "FreeCodeCamp", "https://www.freecodecamp.org/learn/responsive-web-design/", "Course", True),
    ],
    "graphql": [
        _r("GraphQL with React", "Udemy", "https://www.udemy.com/course/graphql-with-react-course/", "Course", False),
        _r("GraphQL Tutorial", "YouTube", "https://www.youtube.com/watch?v=ed8SzALpx1Q", "Video", True),
    ],
    # Backend
    "node.js": [
        _r("Node.js - The Complete Guide", "Udemy", "https://www.udemy.com/course/nodejs-the-complete-guide/", "Course", False),
        _r("Node.js Full Course", "YouTube", "https://www.youtube.com/watch?v=Oe421EPjeBE", "Video", True),
    ],
    "python": [
        _r("Python for Everybody", "Coursera", "https://www.coursera.org/specializations/python", "Course", False),
        _r("Scientific Computing with Python", "FreeCodeCamp", "https://www.freecodecamp.org/learn/scientific-computing-with-python/", "Course", True),
        _r("Python Crash Course", "YouTube", "https://www.youtube.com/watch?v=rfscVS0vtbw", "Video", True),
    ],
    "sql": [
        _r("SQL for Data Science", "Coursera", "https://www.coursera.org/learn/sql-for-data-science", "Course", False),
        _r("SQL Tutorial - Full Course", "YouTube", "https://www.youtube.com/watch?v=HXV3zeQKqGY", "Video", True),
    ],
    # Cloud & DevOps
    "aws": [
        _r("AWS Certified Solutions Architect", "Udemy", "https://www.udemy.com/course/aws-certified-solutions-architect-associate-saa-c03/", "Course", False),
        _r("AWS Tutorial for Beginners", "YouTube", "https://www.youtube.com/watch?v=k1RI5locZE4", "Video", True),
    ],
    "docker": [
        _r("Docker Mastery", "Udemy", "https://www.udemy.com/course/docker-mastery/", "Course", False),
        _r("Docker Tutorial for Beginners", "YouTube", "https://www.youtube.com/watch?v=fqMOX6JJhGo", "Video", True),
    ],
    "kubernetes": [
        _r("Kubernetes for Developers", "Udemy", "https://www.udemy.com/course/kubernetes-for-developers/", "Course", False),
        _r("Kubernetes Crash Course", "YouTube", "https://www.youtube.com/watch?v=s_o8dwzRlu4", "Video", True),
    ],
    # Data
    "machine learning": [
        _r("Machine Learning by Andrew Ng", "Coursera", "https://www.coursera.org/learn/machine-learning", "Course", False),
        _r("Machine Learning Full Course", "YouTube", "https://www.youtube.com/watch?v=9f-GarcDY58", "Video", True),
    ],
    "pandas": [
        _r("Data Analysis with Python", "FreeCodeCamp", "https://www.freecodecamp.org/learn/data-analysis-with-python/", "Course", True),
        _r("Pandas Tutorial", "YouTube", "https://www.youtube.com/watch?v=vmEHCJofslg", "Video", True),
    ],
    # Mobile
    "swift": [
        _r("iOS App Development with Swift", "Coursera", "https://www.coursera.org/specializations/app-development", "Course", False),
        _r("Swift Programming Tutorial", "YouTube", "https://www.youtube.com/watch?v=comQ1-x2a1Q", "Video", True),
    ],
    # Design
    "figma": [
        _r("Figma UI/UX Design Essentials", "Udemy", "https://www.udemy.com/course/figma-ux-ui-design/", "Course", False),
        _r("Figma Tutorial for Beginners", "YouTube", "https://www.youtube.com/watch?v=FTFaQWZBqQ8", "Video", True),
    ],
    "ui/ux": [
        _r("Google UX Design Certificate", "Coursera", "https://www.coursera.org/professional-certificates/google-ux-design", "Course", False),
        _r("UI/UX Design Tutorial", "YouTube", "https://www.youtube.com/watch?v=c9Wg6Cb_YlU", "Video", True),
    ],
}


def _normalize_skill(skill: str) -> str:
    return skill.lower().strip()


def _search_fallback(skill: str) -> list[LearningResource]:
    encoded = quote(skill, safe="")
    return [
        _r(f"Learn {skill}", "YouTube", f"https://www.youtube.com/results?search_query=learn+{encoded}+tutorial", "Video", True),
        _r(f"{skill} Courses", "Coursera", f"https://www.coursera.org/search?query={encoded}", "Course", False),
    ]


def get_resources_for_skill(skill: str) -> list[LearningResource]:
    """Exact lookup, then partial name lookup, then search links."""
    normalized = _normalize_skill(skill)
    if not normalized:
        return []

    if normalized in SKILL_RESOURCES:
        return list(SKILL_RESOURCES[normalized])

    for key, resources in SKILL_RESOURCES.items():
        if key in normalized or normalized in key:
            return list(resources)

    logger.debug("No curated resources for %s, using search links", skill)
    return _search_fallback(skill.strip())


def get_recommendations_for_skills(skills: list[str]) -> list[SkillRecommendation]:
    return [
        SkillRecommendation(skill=skill, resources=get_resources_for_skill(skill))
        for skill in skills
    ]


def get_best_free_resource(skill: str) -> LearningResource | None:
    return next((r for r in get_resources_for_skill(skill) if r.free), None)
