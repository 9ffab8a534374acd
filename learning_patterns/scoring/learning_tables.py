"""Static lookup tables for the visual/auditory/kinesthetic/social taxonomy.

Read-only module constants; nothing here is ever mutated after import.
"""

from types import MappingProxyType

LEARNING_PATTERNS: tuple[str, ...] = ("visual", "auditory", "kinesthetic", "social")

UNKNOWN_PATTERN_DESCRIPTION = "Learning pattern not recognized."

SHORT_DESCRIPTIONS = MappingProxyType(
    {
        "visual": (
            "You learn best through visual aids like charts, diagrams, written instructions, "
            "and seeing information organized spatially."
        ),
        "auditory": (
            "You prefer learning through listening, verbal explanations, discussions, "
            "and processing information through sound."
        ),
        "kinesthetic": (
            "You learn most effectively through hands-on experience, physical practice, "
            "movement, and tactile exploration."
        ),
        "social": (
            "You thrive in collaborative learning environments, group discussions, "
            "and learning through interaction with others."
        ),
    }
)

_DESCRIPTION_EXTENSIONS = {
    "visual": "Visual learners benefit from color-coding, mind maps, and graphic organizers.",
    "auditory": (
        "Auditory learners often benefit from reading aloud, recordings, and group discussions."
    ),
    "kinesthetic": (
        "Kinesthetic learners need to actively engage with material through experimentation "
        "and real-world application."
    ),
    "social": "Social learners benefit from study groups, peer teaching, and collaborative projects.",
}

LONG_DESCRIPTIONS = MappingProxyType(
    {
        pattern: f"{SHORT_DESCRIPTIONS[pattern]} {_DESCRIPTION_EXTENSIONS[pattern]}"
        for pattern in LEARNING_PATTERNS
    }
)

# Label bands, highest first. Scores below every band are "Minimal".
BASIC_STRENGTH_BANDS: tuple[tuple[int, str], ...] = (
    (70, "Strong"),
    (50, "Moderate"),
    (30, "Mild"),
)

WEIGHTED_STRENGTH_BANDS: tuple[tuple[int, str], ...] = (
    (75, "Very Strong"),
    (60, "Strong"),
    (45, "Moderate"),
    (30, "Mild"),
)

MINIMAL_STRENGTH = "Minimal"

# Question position (1-based) to the questionnaire section it belongs to.
QUESTION_CATEGORY_BY_POSITION = MappingProxyType(
    {
        1: "information_processing",
        2: "memory_retention",
        3: "problem_solving",
        4: "study_environment",
        5: "instruction_preference",
        6: "note_taking",
        7: "concentration",
        8: "feedback_preference",
        9: "test_preparation",
        10: "comprehension",
    }
)

GENERAL_QUESTION_CATEGORY = "general"

# Weights the service stores for each questionnaire section. The engine itself
# defaults to a uniform 1.0 and only applies these when they are passed in.
DEFAULT_QUESTION_CATEGORY_WEIGHTS = MappingProxyType(
    {
        "information_processing": 1.0,
        "memory_retention": 1.2,
        "problem_solving": 1.1,
        "study_environment": 0.9,
        "instruction_preference": 1.0,
        "note_taking": 0.8,
        "concentration": 1.1,
        "feedback_preference": 0.9,
        "test_preparation": 1.2,
        "comprehension": 1.3,
    }
)

PATTERN_SYNERGY = MappingProxyType(
    {
        "visual_auditory": 0.8,
        "visual_kinesthetic": 0.9,
        "visual_social": 0.7,
        "auditory_kinesthetic": 0.6,
        "auditory_social": 0.9,
        "kinesthetic_social": 0.8,
    }
)

DEFAULT_SYNERGY = 0.5

COMBINED_APPROACHES = MappingProxyType(
    {
        "visual_auditory": (
            "Combine visual materials with verbal explanations. "
            "Use annotated diagrams and recorded lectures."
        ),
        "visual_kinesthetic": (
            "Use interactive visual tools, hands-on building with visual guides, "
            "and physical manipulation of visual elements."
        ),
        "visual_social": (
            "Create visual presentations for group discussions and collaborative "
            "mind mapping sessions."
        ),
        "auditory_kinesthetic": (
            "Engage in verbal practice while doing hands-on activities, like explaining "
            "processes while performing them."
        ),
        "auditory_social": (
            "Participate in group discussions, verbal brainstorming, and peer teaching sessions."
        ),
        "kinesthetic_social": "Engage in collaborative hands-on projects and group experiments.",
    }
)

GENERIC_COMBINED_APPROACH = "Combine both approaches for optimal learning."

BALANCED_APPROACH_TEMPLATE = (
    "Your {first} and {second} preferences are fairly balanced. Try alternating between "
    "both approaches or combining them based on the complexity of the material."
)

COMPLEMENTARY_APPROACH_TEMPLATE = (
    "Use your stronger {stronger} preference as your primary approach, while occasionally "
    "incorporating {weaker} elements to reinforce learning."
)

EFFICIENCY_BANDS: tuple[tuple[int, str], ...] = (
    (80, "Highly efficient learning profile with clear preferences"),
    (65, "Good learning efficiency with some adaptability"),
    (50, "Moderate efficiency, benefits from varied approaches"),
)
EFFICIENCY_FALLBACK = "Flexible learning profile, adapts well to different methods"

ADAPTABILITY_BANDS: tuple[tuple[int, str], ...] = (
    (75, "Highly adaptable, thrives with varied learning approaches"),
    (60, "Good adaptability, comfortable with multiple methods"),
    (45, "Moderate adaptability, prefers some consistency"),
)
ADAPTABILITY_FALLBACK = "Prefers consistent approaches, benefits from routine"

PRIMARY_RECOMMENDATIONS = MappingProxyType(
    {
        "visual": (
            "Use mind maps and concept diagrams for complex topics",
            "Color-code your notes and materials",
            "Create visual timelines and flowcharts",
            "Use flashcards with images and diagrams",
        ),
        "auditory": (
            "Read materials aloud or use text-to-speech",
            "Record lectures and review them regularly",
            "Explain concepts to yourself or others",
            "Use music or rhythmic patterns to remember information",
        ),
        "kinesthetic": (
            "Take breaks to move around while studying",
            "Use hands-on activities and experiments",
            "Write notes by hand rather than typing",
            "Use physical objects to represent abstract concepts",
        ),
        "social": (
            "Form or join study groups",
            "Participate in class discussions and forums",
            "Teach concepts to others",
            "Engage in collaborative projects",
        ),
    }
)

SECONDARY_RECOMMENDATION_TEMPLATE = (
    "Incorporate {pattern} elements to complement your primary learning style"
)

ENVIRONMENT_RECOMMENDATIONS = MappingProxyType(
    {
        "visual": (
            "Well-lit, organized workspace",
            "Minimal visual distractions",
            "Wall space for charts and diagrams",
        ),
        "auditory": (
            "Quiet space or appropriate background music",
            "Good acoustics for recordings",
            "Minimize sound distractions",
        ),
        "kinesthetic": (
            "Space to move around",
            "Comfortable seating options",
            "Access to hands-on materials",
        ),
        "social": (
            "Access to collaborative spaces",
            "Good internet for online discussions",
            "Comfortable group meeting areas",
        ),
    }
)

TECHNOLOGY_RECOMMENDATIONS = MappingProxyType(
    {
        "visual": ("Mind mapping software", "Digital drawing tools", "Video content platforms"),
        "auditory": ("Audio recording apps", "Podcast platforms", "Text-to-speech tools"),
        "kinesthetic": (
            "Interactive simulations",
            "Virtual reality tools",
            "Touch-screen devices",
        ),
        "social": ("Video conferencing tools", "Collaborative platforms", "Discussion forums"),
    }
)

# Social score bands, highest first.
SOCIAL_RECOMMENDATIONS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (60, ("Actively seek group learning opportunities", "Consider becoming a peer tutor")),
    (30, ("Balance independent and group study", "Occasionally work with study partners")),
    (0, ("Focus on independent study methods", "Use social learning sparingly")),
)

# Stored-profile recommendations, applied for the dominant pattern and any
# pattern scoring above PROFILE_RECOMMENDATION_SCORE.
PROFILE_RECOMMENDATION_SCORE = 60

PROFILE_RECOMMENDATIONS = MappingProxyType(
    {
        "visual": {
            "studyTechniques": (
                "Use mind maps and diagrams to organize information",
                "Create flashcards with visual cues",
                "Highlight and color-code your notes",
            ),
            "environmentalFactors": (
                "Study in well-lit areas",
                "Keep your study space organized and clutter-free",
            ),
            "resourceTypes": (
                "Video tutorials and demonstrations",
                "Infographics and visual guides",
                "Charts and graphs",
            ),
        },
        "auditory": {
            "studyTechniques": (
                "Read materials aloud",
                "Record lectures and review them",
                "Explain concepts to yourself or others",
            ),
            "environmentalFactors": (
                "Study with soft background music if helpful",
                "Use quiet spaces for reading",
            ),
            "resourceTypes": (
                "Podcasts and audio books",
                "Recorded lectures",
                "Discussion groups and study partners",
            ),
        },
        "kinesthetic": {
            "studyTechniques": (
                "Take breaks to move around while studying",
                "Use hands-on activities and experiments",
                "Write notes by hand rather than typing",
            ),
            "environmentalFactors": (
                "Study in different locations",
                "Use a standing desk or exercise ball",
            ),
            "resourceTypes": (
                "Interactive simulations",
                "Hands-on workshops",
                "Physical models and manipulatives",
            ),
        },
        "social": {
            "studyTechniques": (
                "Form study groups",
                "Teach concepts to others",
                "Participate in class discussions",
            ),
            "environmentalFactors": (
                "Study in collaborative spaces",
                "Join online learning communities",
            ),
            "resourceTypes": (
                "Group projects and presentations",
                "Peer tutoring sessions",
                "Online forums and discussion boards",
            ),
        },
    }
)

GENERAL_STUDY_TIPS: tuple[str, ...] = (
    "Review and adjust your study methods regularly",
    "Combine different learning approaches for best results",
    "Take regular breaks to maintain focus",
    "Set specific learning goals and track your progress",
)
