"""Static lookup tables for the five-dimension cognitive fingerprint.

Read-only module constants; nothing here is ever mutated after import.
"""

from types import MappingProxyType

COGNITIVE_DIMENSIONS = MappingProxyType(
    {
        "texture": ("smooth_flowing", "rough_grippable", "sand_shifting", "clay_moldable"),
        "temperature": ("cool_logical", "warm_narrative", "hot_urgent", "alternating_temp"),
        "ecosystem": ("garden_organic", "city_systems", "forest_hierarchical", "ocean_depth"),
        "temporal": ("tidal_steady", "seasonal_deep", "lightning_burst", "heartbeat_maintenance"),
        "spatial": ("foundation_up", "big_picture_down", "modular", "flowing"),
    }
)

COGNITIVE_ALGORITHM = "cognitive_multi_dimensional_advanced"

# Pattern assumed when a scenario option names a pattern this table does not know.
DEFAULT_DIMENSION_PATTERNS = MappingProxyType(
    {
        "texture": "smooth_flowing",
        "temperature": "cool_logical",
        "ecosystem": "garden_organic",
        "temporal": "tidal_steady",
        "spatial": "foundation_up",
    }
)

# Scenario-question option patterns to the cognitive pattern they express.
SCENARIO_PATTERN_MAP = MappingProxyType(
    {
        "texture": MappingProxyType(
            {
                "structured_preparation": "rough_grippable",
                "fluid_expression": "smooth_flowing",
                "concrete_points": "rough_grippable",
                "responsive_adaptation": "sand_shifting",
                "tactile_concrete": "rough_grippable",
                "intuitive_adaptation": "clay_moldable",
                "concrete_progress": "rough_grippable",
                "granular_breakdown": "sand_shifting",
                "fact_grounding": "rough_grippable",
                "tangible_examples": "rough_grippable",
                "concrete_feedback": "rough_grippable",
                "aesthetic_flow": "smooth_flowing",
            }
        ),
        "temperature": MappingProxyType(
            {
                "high_intensity": "hot_urgent",
                "moderate_ambient": "warm_narrative",
                "low_systematic": "cool_logical",
                "warm_social": "warm_narrative",
                "immediate_application": "hot_urgent",
                "engaging_intensity": "hot_urgent",
                "energy_motivation": "hot_urgent",
            }
        ),
        "ecosystem": MappingProxyType(
            {
                "narrative_connection": "garden_organic",
                "linear_causal": "city_systems",
                "web_systems": "ocean_depth",
                "hierarchical_structure": "forest_hierarchical",
                "concrete_expansion": "garden_organic",
                "cultural_context": "ocean_depth",
                "flavor_integration": "ocean_depth",
                "collaborative_processing": "garden_organic",
                "idea_connections": "ocean_depth",
                "pattern_recognition": "ocean_depth",
                "synthesis_connection": "ocean_depth",
                "collaborative_thinking": "garden_organic",
                "holistic_integration": "ocean_depth",
                "metaphorical_connection": "garden_organic",
            }
        ),
        "temporal": MappingProxyType(
            {
                "rhythm_sequence": "tidal_steady",
                "interval_bursts": "lightning_burst",
                "deep_immersion": "seasonal_deep",
                "steady_accumulation": "tidal_steady",
                "intuitive_flow": "heartbeat_maintenance",
                "auditory_rhythm": "tidal_steady",
                "timing_coordination": "heartbeat_maintenance",
                "burst_recovery": "lightning_burst",
                "time_coordination": "tidal_steady",
                "incubation_processing": "seasonal_deep",
                "chronological_tracking": "tidal_steady",
                "natural_rhythm": "heartbeat_maintenance",
                "adaptive_pacing": "heartbeat_maintenance",
            }
        ),
        "spatial": MappingProxyType(
            {
                "visual_spatial": "big_picture_down",
                "sequential_build": "foundation_up",
                "goal_visualization": "big_picture_down",
                "holistic_assembly": "modular",
                "adaptive_construction": "flowing",
                "systematic_structure": "foundation_up",
                "systematic_preparation": "foundation_up",
                "perspective_shift": "big_picture_down",
                "logical_progression": "foundation_up",
                "structural_planning": "foundation_up",
                "visual_mapping": "big_picture_down",
                "scope_visualization": "big_picture_down",
                "structured_progression": "foundation_up",
                "scaffolded_building": "foundation_up",
            }
        ),
    }
)

UNKNOWN_COGNITIVE_PATTERN = "Unique cognitive pattern"

PATTERN_DESCRIPTIONS = MappingProxyType(
    {
        "texture": MappingProxyType(
            {
                "smooth_flowing": (
                    "Prefers seamless, connected information that flows logically from one "
                    "concept to the next"
                ),
                "rough_grippable": (
                    "Needs concrete, tangible concepts with clear boundaries and specific "
                    "details to grasp"
                ),
                "sand_shifting": (
                    "Appreciates flexible, adaptable information that can be viewed from "
                    "multiple perspectives"
                ),
                "clay_moldable": (
                    "Wants to actively shape and transform ideas through hands-on manipulation "
                    "and experimentation"
                ),
            }
        ),
        "temperature": MappingProxyType(
            {
                "cool_logical": (
                    "Thrives in objective, analytical environments with facts and systematic "
                    "reasoning"
                ),
                "warm_narrative": (
                    "Learns best through stories, emotional connections, and personally "
                    "meaningful contexts"
                ),
                "hot_urgent": (
                    "Motivated by intensity, immediacy, and high-stakes applications with clear "
                    "deadlines"
                ),
                "alternating_temp": (
                    "Benefits from variety in emotional intensity and pacing throughout learning "
                    "experiences"
                ),
            }
        ),
        "ecosystem": MappingProxyType(
            {
                "garden_organic": (
                    "Sees natural, evolving connections between ideas that grow and develop "
                    "organically"
                ),
                "city_systems": (
                    "Prefers organized, systematic relationships with clear functions and "
                    "structured interactions"
                ),
                "forest_hierarchical": (
                    "Thinks in structured levels and hierarchies, building from ground up to "
                    "complex canopies"
                ),
                "ocean_depth": (
                    "Explores deep, far-reaching connections that span vast conceptual distances"
                ),
            }
        ),
        "temporal": MappingProxyType(
            {
                "tidal_steady": (
                    "Works best with consistent, regular patterns and predictable learning rhythms"
                ),
                "seasonal_deep": (
                    "Prefers cycles of extensive preparation followed by periods of intensive "
                    "learning and growth"
                ),
                "lightning_burst": (
                    "Learns through sudden insights, breakthrough moments, and intense focus "
                    "sessions"
                ),
                "heartbeat_maintenance": (
                    "Maintains steady progress with periodic acceleration and regular "
                    "maintenance cycles"
                ),
            }
        ),
        "spatial": MappingProxyType(
            {
                "foundation_up": (
                    "Builds knowledge systematically from basic principles to complex applications"
                ),
                "big_picture_down": (
                    "Starts with comprehensive overviews and fills in specific details "
                    "progressively"
                ),
                "modular": (
                    "Learns in independent pieces that can be flexibly combined and connected "
                    "over time"
                ),
                "flowing": (
                    "Allows understanding to develop organically following natural curiosity "
                    "and interest"
                ),
            }
        ),
    }
)

PATHWAY_RECOMMENDATIONS = MappingProxyType(
    {
        "texture": MappingProxyType(
            {
                "smooth_flowing": (
                    "Sequential learning modules with clear connections",
                    "Narrative-based information presentation",
                    "Process-oriented explanations",
                ),
                "rough_grippable": (
                    "Concrete examples and case studies",
                    "Hands-on practice with tangible outcomes",
                    "Step-by-step procedural learning",
                ),
                "sand_shifting": (
                    "Flexible, adaptive learning paths",
                    "Context-sensitive information",
                    "Multiple perspective approaches",
                ),
                "clay_moldable": (
                    "Interactive, manipulable content",
                    "Creative project-based learning",
                    "Experimental exploration opportunities",
                ),
            }
        ),
        "temperature": MappingProxyType(
            {
                "cool_logical": (
                    "Data-driven, analytical content",
                    "Objective, fact-based presentations",
                    "Systematic problem-solving approaches",
                ),
                "warm_narrative": (
                    "Story-based learning",
                    "Personal connection to material",
                    "Contextual, meaningful examples",
                ),
                "hot_urgent": (
                    "High-stakes, time-pressured scenarios",
                    "Immediate application opportunities",
                    "Competitive or challenging environments",
                ),
                "alternating_temp": (
                    "Varied pacing and intensity",
                    "Mixed approaches within sessions",
                    "Flexible engagement strategies",
                ),
            }
        ),
        "ecosystem": MappingProxyType(
            {
                "garden_organic": (
                    "Discovery-based learning",
                    "Natural progression of complexity",
                    "Emergent understanding approaches",
                ),
                "city_systems": (
                    "Structured, systematic curricula",
                    "Clear roles and relationships",
                    "Organized knowledge frameworks",
                ),
                "forest_hierarchical": (
                    "Layered, foundational approaches",
                    "Prerequisite-based progressions",
                    "Scaffolded complexity building",
                ),
                "ocean_depth": (
                    "Deep-dive explorations",
                    "Interconnected concept mapping",
                    "Philosophical and theoretical foundations",
                ),
            }
        ),
        "temporal": MappingProxyType(
            {
                "tidal_steady": (
                    "Regular, consistent study schedules",
                    "Predictable learning rhythms",
                    "Steady progress tracking",
                ),
                "seasonal_deep": (
                    "Intensive learning periods",
                    "Extended preparation phases",
                    "Cyclical review and mastery",
                ),
                "lightning_burst": (
                    "Intensive workshop formats",
                    "Breakthrough-focused sessions",
                    "High-concentration learning bursts",
                ),
                "heartbeat_maintenance": (
                    "Regular maintenance with periodic intensity",
                    "Balanced routine with occasional acceleration",
                    "Sustainable long-term learning patterns",
                ),
            }
        ),
        "spatial": MappingProxyType(
            {
                "foundation_up": (
                    "Progressive skill building",
                    "Prerequisite mastery requirements",
                    "Solid foundational approaches",
                ),
                "big_picture_down": (
                    "Overview-first presentations",
                    "Top-down design thinking",
                    "Conceptual framework starters",
                ),
                "modular": (
                    "Independent learning modules",
                    "Flexible assembly of knowledge",
                    "Component-based understanding",
                ),
                "flowing": (
                    "Organic learning experiences",
                    "Intuitive progression paths",
                    "Natural knowledge emergence",
                ),
            }
        ),
    }
)

# Growth suggestions: the pattern worth developing next to each primary pattern.
# Some point across dimensions (hot_urgent -> seasonal_deep); those yield no activities.
COMPLEMENTARY_PATTERNS = MappingProxyType(
    {
        "texture": MappingProxyType(
            {
                "smooth_flowing": ("rough_grippable",),
                "rough_grippable": ("sand_shifting",),
                "sand_shifting": ("clay_moldable",),
                "clay_moldable": ("smooth_flowing",),
            }
        ),
        "temperature": MappingProxyType(
            {
                "cool_logical": ("warm_narrative",),
                "warm_narrative": ("cool_logical",),
                "hot_urgent": ("seasonal_deep",),
                "alternating_temp": ("tidal_steady",),
            }
        ),
        "ecosystem": MappingProxyType(
            {
                "garden_organic": ("city_systems",),
                "city_systems": ("ocean_depth",),
                "forest_hierarchical": ("garden_organic",),
                "ocean_depth": ("forest_hierarchical",),
            }
        ),
        "temporal": MappingProxyType(
            {
                "tidal_steady": ("lightning_burst",),
                "seasonal_deep": ("heartbeat_maintenance",),
                "lightning_burst": ("tidal_steady",),
                "heartbeat_maintenance": ("seasonal_deep",),
            }
        ),
        "spatial": MappingProxyType(
            {
                "foundation_up": ("big_picture_down",),
                "big_picture_down": ("foundation_up",),
                "modular": ("flowing",),
                "flowing": ("modular",),
            }
        ),
    }
)

COGNITIVE_PATTERN_SYNERGY = MappingProxyType(
    {
        "smooth_flowing_tidal_steady": 0.9,
        "lightning_burst_hot_urgent": 0.9,
        "garden_organic_clay_moldable": 0.8,
        "city_systems_foundation_up": 0.8,
        "ocean_depth_seasonal_deep": 0.9,
    }
)

# Pattern pairs that define a named profile, checked in order. The style
# description and the overall type share the pairs but not the precedence.
STYLE_DESCRIPTIONS: tuple[tuple[tuple[str, str], str], ...] = (
    (
        ("smooth_flowing", "tidal_steady"),
        "consistent, systematic processing with a preference for clear, connected "
        "information flows.",
    ),
    (
        ("lightning_burst", "hot_urgent"),
        "intense, breakthrough-oriented thinking with high-energy problem-solving approaches.",
    ),
    (
        ("clay_moldable", "garden_organic"),
        "creative, adaptive thinking that shapes and evolves ideas through exploration.",
    ),
    (
        ("ocean_depth", "seasonal_deep"),
        "deep, reflective processing that uncovers hidden connections through patient "
        "exploration.",
    ),
)
STYLE_PREFIX = "Your cognitive style is characterized by "
STYLE_FALLBACK = (
    "a unique combination of cognitive preferences that creates a distinctive thinking style."
)

PROFILE_TYPES: tuple[tuple[tuple[str, str], str], ...] = (
    (("lightning_burst", "hot_urgent"), "Intensity Processor"),
    (("smooth_flowing", "tidal_steady"), "Flow State Learner"),
    (("clay_moldable", "garden_organic"), "Creative Explorer"),
    (("ocean_depth", "seasonal_deep"), "Deep Contemplator"),
)
DEFAULT_PROFILE_TYPE = "Adaptive Thinker"

STUDY_TECHNIQUES = MappingProxyType(
    {
        "texture": MappingProxyType(
            {
                "smooth_flowing": (
                    "Use sequential learning modules with clear progressions",
                    "Create narrative-based study materials",
                    "Follow guided learning paths with smooth transitions",
                ),
                "rough_grippable": (
                    "Break information into concrete, manageable chunks",
                    "Use flashcards with specific facts and details",
                    "Practice with tangible examples and case studies",
                ),
                "sand_shifting": (
                    "Adapt study methods based on context and mood",
                    "Use flexible scheduling and varied approaches",
                    "Switch between different perspectives on the same topic",
                ),
                "clay_moldable": (
                    "Create interactive study materials you can modify",
                    "Use mind mapping and concept manipulation tools",
                    "Engage in project-based learning with creative freedom",
                ),
            }
        ),
        "temperature": MappingProxyType(
            {
                "cool_logical": (
                    "Focus on data-driven and analytical content",
                    "Use systematic problem-solving approaches",
                    "Maintain objective, fact-based study sessions",
                ),
                "warm_narrative": (
                    "Connect learning to personal stories and experiences",
                    "Use case studies and real-world examples",
                    "Incorporate emotional context into study materials",
                ),
                "hot_urgent": (
                    "Set tight deadlines and competitive goals",
                    "Use high-stakes practice scenarios",
                    "Create urgency through time-pressured exercises",
                ),
                "alternating_temp": (
                    "Mix intensive and relaxed study periods",
                    "Alternate between different emotional approaches",
                    "Use varied pacing throughout learning sessions",
                ),
            }
        ),
    }
)

LEARNING_ENVIRONMENTS = MappingProxyType(
    {
        "ecosystem": MappingProxyType(
            {
                "garden_organic": (
                    "Study in natural, peaceful environments",
                    "Use organic, unstructured learning spaces",
                    "Allow for spontaneous discovery and exploration",
                ),
                "city_systems": (
                    "Organize study space with clear systems",
                    "Use structured, well-organized environments",
                    "Maintain consistent, functional learning areas",
                ),
                "forest_hierarchical": (
                    "Create layered information displays",
                    "Use hierarchical organization systems",
                    "Build from simple to complex arrangements",
                ),
                "ocean_depth": (
                    "Seek quiet, contemplative spaces",
                    "Use minimal distractions for deep focus",
                    "Create environments that support extended concentration",
                ),
            }
        ),
        "spatial": MappingProxyType(
            {
                "foundation_up": (
                    "Start with basic, clean workspace setup",
                    "Build complexity gradually in your environment",
                    "Maintain clear foundations before adding elements",
                ),
                "big_picture_down": (
                    "Use walls for big-picture visual displays",
                    "Start with overview materials prominently displayed",
                    "Fill in details in secondary locations",
                ),
                "modular": (
                    "Create flexible, reconfigurable study spaces",
                    "Use moveable elements and modular furniture",
                    "Separate different subjects into distinct areas",
                ),
                "flowing": (
                    "Allow for organic, natural flow in your space",
                    "Avoid rigid structure in environment setup",
                    "Let your space evolve naturally with your needs",
                ),
            }
        ),
    }
)

TECHNOLOGICAL_TOOLS = MappingProxyType(
    {
        "texture": MappingProxyType(
            {
                "smooth_flowing": (
                    "Linear learning platforms",
                    "Sequential course apps",
                    "Guided tutorial software",
                ),
                "rough_grippable": (
                    "Flashcard apps",
                    "Quiz platforms",
                    "Fact-based learning tools",
                ),
                "sand_shifting": (
                    "Adaptive learning systems",
                    "Multi-modal platforms",
                    "Flexible content apps",
                ),
                "clay_moldable": (
                    "Mind mapping software",
                    "Creative project tools",
                    "Interactive simulation platforms",
                ),
            }
        ),
        "temperature": MappingProxyType(
            {
                "cool_logical": (
                    "Data analysis tools",
                    "Logical reasoning apps",
                    "Systematic learning platforms",
                ),
                "warm_narrative": (
                    "Story-based learning apps",
                    "Social learning platforms",
                    "Community-driven tools",
                ),
                "hot_urgent": (
                    "Gamified learning platforms",
                    "Time-pressured quiz apps",
                    "Competitive learning tools",
                ),
                "alternating_temp": (
                    "Multi-modal learning apps",
                    "Variety-focused platforms",
                    "Adaptive pacing tools",
                ),
            }
        ),
    }
)

COLLABORATION_STRATEGIES = MappingProxyType(
    {
        "garden_organic": (
            "Participate in organic, discussion-based study groups",
            "Engage in peer-to-peer learning networks",
            "Use collaborative discovery sessions",
        ),
        "city_systems": (
            "Join structured study groups with defined roles",
            "Participate in organized learning communities",
            "Use systematic peer review processes",
        ),
        "forest_hierarchical": (
            "Engage in mentorship relationships",
            "Participate in hierarchical learning structures",
            "Use tiered group learning approaches",
        ),
        "ocean_depth": (
            "Engage in deep, philosophical discussions",
            "Participate in long-form collaborative projects",
            "Use contemplative group learning sessions",
        ),
    }
)

TIME_MANAGEMENT = MappingProxyType(
    {
        "tidal_steady": (
            "Maintain consistent daily study schedules",
            "Use regular, predictable time blocks",
            "Build sustainable long-term habits",
        ),
        "seasonal_deep": (
            "Plan intensive learning periods",
            "Use cyclical study schedules",
            "Allow for extended preparation phases",
        ),
        "lightning_burst": (
            "Capitalize on moments of high energy and focus",
            "Use intensive, short-duration study sessions",
            "Be ready to act on sudden insights",
        ),
        "heartbeat_maintenance": (
            "Balance regular maintenance with periodic intensity",
            "Use pulsed learning rhythms",
            "Maintain steady progress with strategic acceleration",
        ),
    }
)

# Behaviour-profile keyword to the skills worth practising, per profile field.
SKILL_DEVELOPMENT: tuple[tuple[str, tuple[tuple[str, tuple[str, ...]], ...]], ...] = (
    (
        "decisionMaking",
        (
            (
                "Deliberative",
                (
                    "Practice quick decision-making exercises",
                    "Use time-limited choice scenarios",
                ),
            ),
            (
                "Decisive",
                (
                    "Develop reflection and consideration skills",
                    "Practice analyzing multiple perspectives",
                ),
            ),
        ),
    ),
    (
        "processingStyle",
        (
            (
                "Rapid",
                (
                    "Develop deep processing techniques",
                    "Practice patience and thorough analysis",
                ),
            ),
            (
                "Deep",
                (
                    "Practice rapid information processing",
                    "Develop quick synthesis skills",
                ),
            ),
        ),
    ),
)

RECOMMENDATION_EXPLANATIONS = MappingProxyType(
    {
        "studyTechniques": (
            "These techniques align with your cognitive patterns for optimal information "
            "processing"
        ),
        "learningEnvironments": "These environments support your natural cognitive preferences",
        "technologicalTools": (
            "These tools complement your thinking style and processing patterns"
        ),
        "collaborationStrategies": (
            "These approaches match your social and interactive learning preferences"
        ),
        "timeManagement": "These timing strategies align with your natural learning rhythms",
        "skillDevelopment": (
            "These areas represent opportunities for cognitive growth and balance"
        ),
    }
)

DIMENSION_EXPLANATIONS = MappingProxyType(
    {
        "texture": {
            "name": "Information Texture",
            "description": (
                "How you prefer information to 'feel' - whether smooth and flowing, rough and "
                "grippable, shifting like sand, or moldable like clay."
            ),
            "patterns": {
                "smooth_flowing": (
                    "You prefer seamless, connected information that flows logically from one "
                    "concept to the next"
                ),
                "rough_grippable": (
                    "You need concrete, tangible concepts with clear boundaries that you can "
                    "mentally grasp"
                ),
                "sand_shifting": (
                    "You appreciate flexible, adaptable information that can be viewed from "
                    "multiple perspectives"
                ),
                "clay_moldable": (
                    "You want to actively shape and transform ideas through hands-on manipulation"
                ),
            },
        },
        "temperature": {
            "name": "Learning Temperature",
            "description": (
                "Your emotional and cognitive temperature preferences - from cool analysis to "
                "warm narratives to hot urgency."
            ),
            "patterns": {
                "cool_logical": (
                    "You thrive in objective, analytical environments with systematic reasoning"
                ),
                "warm_narrative": (
                    "You learn best through stories, emotional connections, and personally "
                    "meaningful contexts"
                ),
                "hot_urgent": (
                    "You're motivated by intensity, immediacy, and high-stakes applications"
                ),
                "alternating_temp": "You benefit from variety in emotional intensity and pacing",
            },
        },
        "ecosystem": {
            "name": "Concept Ecosystem",
            "description": (
                "How you organize and relate concepts - like a garden, city, forest, or ocean."
            ),
            "patterns": {
                "garden_organic": (
                    "You see natural, evolving connections between ideas that grow organically"
                ),
                "city_systems": (
                    "You prefer organized, systematic relationships with clear functions"
                ),
                "forest_hierarchical": "You think in structured levels and hierarchies",
                "ocean_depth": (
                    "You explore deep, far-reaching connections across vast conceptual distances"
                ),
            },
        },
        "temporal": {
            "name": "Learning Rhythms",
            "description": (
                "Your natural learning rhythms and timing patterns - steady like tides, deep "
                "like seasons, burst like lightning, or pulsed like a heartbeat."
            ),
            "patterns": {
                "tidal_steady": (
                    "You work best with consistent, regular patterns and predictable rhythms"
                ),
                "seasonal_deep": (
                    "You prefer cycles of preparation followed by intensive learning periods"
                ),
                "lightning_burst": "You learn through sudden insights and intense focus sessions",
                "heartbeat_maintenance": (
                    "You maintain steady progress with periodic acceleration"
                ),
            },
        },
        "spatial": {
            "name": "Mental Construction",
            "description": (
                "How you build and organize knowledge - from the ground up, top-down, in "
                "modules, or organically flowing."
            ),
            "patterns": {
                "foundation_up": (
                    "You build knowledge systematically from basic principles to complex "
                    "applications"
                ),
                "big_picture_down": (
                    "You start with comprehensive overviews and fill in specific details"
                ),
                "modular": (
                    "You learn in independent pieces that can be flexibly combined over time"
                ),
                "flowing": (
                    "You allow understanding to develop organically following natural curiosity"
                ),
            },
        },
    }
)
