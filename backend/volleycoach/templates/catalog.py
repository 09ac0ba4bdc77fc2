"""
Built-in training plan templates.

Workout day ``day`` values are weekday indices (0=Sunday..6=Saturday).
"""
import copy
from typing import Any, Dict, List, Optional

WARM_UP = {"name": "Warm-up", "reps": "10 mins", "focus": "Dynamic stretching, light cardio, band work"}

TRAINING_TEMPLATES: List[Dict[str, Any]] = [
    {
        "id": "4-week-volleyball-performance",
        "title": "4-Week Volleyball Performance Program",
        "duration": "4 weeks",
        "level": "Intermediate",
        "goals": ["Increase Hit Strength", "Improve Hit Form", "Increase Jump Height"],
        "description": (
            "Builds a base for hit strength, improves hit form consistency "
            "and increases vertical explosiveness."
        ),
        "phases": [
            {
                "name": "Phase 1: Strength and Foundational Form",
                "weeks": "Weeks 1 & 2",
                "description": "Maximum strength for hitting power and muscle memory for form.",
                "workoutDays": [
                    {
                        "day": 1,
                        "title": "Max Strength & Power (Lower Body Focus)",
                        "exercises": [
                            WARM_UP,
                            {"name": "Squat Variation (Back/Front)", "sets": 3, "reps": "5", "focus": "Max Power", "notes": "Heavy weight, controlled descent, explosive ascent"},
                            {"name": "RDL (Romanian Deadlift)", "sets": 3, "reps": "8", "focus": "Posterior Chain", "notes": "Focus on hamstring stretch and glute engagement"},
                            {"name": "Walking Lunges (Weighted)", "sets": 3, "reps": "10/leg", "focus": "Unilateral Strength", "notes": "Improves stability and hitting rotation"},
                            {"name": "Calf Raises (Weighted)", "sets": 3, "reps": "15", "focus": "Explosiveness", "notes": "Pause briefly at the top"},
                            {"name": "Abdominal Circuit", "sets": 3, "reps": "45 sec", "focus": "Core Stability", "notes": "Planks, Russian Twists"},
                        ],
                    },
                    {
                        "day": 2,
                        "title": "Vertical Explosiveness (Low Volume Plyometrics)",
                        "exercises": [
                            WARM_UP,
                            {"name": "Box Jumps (High)", "sets": 4, "reps": "5", "focus": "Vertical Power", "notes": "Step down after landing; do not jump down"},
                            {"name": "Squat Jumps", "sets": 3, "reps": "8", "focus": "Quick Response", "notes": "Explode straight up, minimize ground contact time"},
                            {"name": "Lateral Bounds", "sets": 3, "reps": "5/leg", "focus": "Agility/Lateral Power", "notes": "Focus on sticking the landing"},
                            {"name": "Depth Jumps", "sets": 3, "reps": "4", "focus": "Reaction", "notes": "Step off box, instantly jump vertically upon ground contact"},
                        ],
                    },
                    {
                        "day": 3,
                        "title": "Hitting Form & Consistency (Court Day)",
                        "exercises": [
                            {"name": "Approach Footwork", "sets": 5, "reps": "10", "focus": "Tempo/Timing", "notes": "Practice full approach without hitting"},
                            {"name": "Self-Feed Hitting", "sets": 3, "reps": "20", "focus": "Arm Swing", "notes": "High elbow, full shoulder rotation and snap"},
                            {"name": "Block & Transition", "sets": 5, "reps": "5", "focus": "Form Flow", "notes": "Practice blocking, landing, transitioning to hit"},
                            {"name": "Target Hitting", "sets": 3, "reps": "10", "focus": "Placement", "notes": "Use targets to practice angled hits"},
                        ],
                    },
                ],
            },
            {
                "name": "Phase 2: Power and Integration",
                "weeks": "Weeks 3 & 4",
                "description": "Translate raw strength into explosive power and keep form under fatigue.",
                "workoutDays": [
                    {
                        "day": 4,
                        "title": "Power & Upper Body Focus",
                        "exercises": [
                            WARM_UP,
                            {"name": "Hang Clean or Power Snatch", "sets": 4, "reps": "3", "focus": "Full-body Explosiveness", "notes": "Focus on perfect form and speed"},
                            {"name": "Dumbbell Bench Press (Incline)", "sets": 3, "reps": "6", "focus": "Upper Chest/Shoulder", "notes": "Pushing power for the hitting motion"},
                            {"name": "Pull-ups/Lat Pulldowns", "sets": 3, "reps": "8", "focus": "Back Strength", "notes": "Snap and control in arm swing"},
                            {"name": "Medicine Ball Slams", "sets": 3, "reps": "10", "focus": "Core & Hitting Speed", "notes": "Explode ball down as hard as possible"},
                            {"name": "Split Squats (Bulgarian)", "sets": 3, "reps": "8/leg", "focus": "Stability", "notes": "Hitting and jumping control"},
                        ],
                    },
                    {
                        "day": 5,
                        "title": "Max Vertical Jump Training (High Intensity Plyometrics)",
                        "exercises": [
                            WARM_UP,
                            {"name": "Broad Jumps", "sets": 4, "reps": "5", "focus": "Horizontal Power", "notes": "Reach max distance using arm swing"},
                            {"name": "Continuous Cone Hops", "sets": 3, "reps": "20 sec", "focus": "Agility/Foot Speed", "notes": "Light and fast, quick ground contact"},
                            {"name": "Single-Leg Hops (Forward)", "sets": 3, "reps": "8/leg", "focus": "Jump Stability", "notes": "Single-leg take-off"},
                            {"name": "Approach Jumps", "sets": 4, "reps": "6", "focus": "Volleyball Specific", "notes": "Full approach, jump as high as possible"},
                        ],
                    },
                    {
                        "day": 6,
                        "title": "Hitting Volume & Fatigue Resistance (Court Day)",
                        "exercises": [
                            {"name": "Conditioning", "reps": "10 mins", "focus": "Light cardio, dynamic stretching"},
                            {"name": "Setter-Dump-Hit Drill", "sets": 4, "reps": "15", "focus": "Game-Speed", "notes": "Transition between defense and full-speed hit"},
                            {"name": "Tipping/Off-Speed Practice", "sets": 3, "reps": "15", "focus": "Control/Touch", "notes": "Place tips over blockers, soft angles"},
                            {"name": "High Rep Approach & Hit", "sets": 5, "reps": "10", "focus": "Endurance", "notes": "Maintain good form under fatigue"},
                            {"name": "Serving Practice", "sets": 2, "reps": "20", "focus": "Power & Consistency"},
                        ],
                    },
                ],
            },
        ],
    },
    {
        "id": "beginner-fundamentals",
        "title": "Beginner Volleyball Fundamentals",
        "duration": "6 weeks",
        "level": "Beginner",
        "goals": ["Build Base Fitness", "Learn Proper Form", "Develop Consistency"],
        "description": (
            "For athletes new to structured volleyball training: a fitness "
            "foundation and proper technique for the fundamental skills."
        ),
        "phases": [
            {
                "name": "Foundation Building",
                "weeks": "Weeks 1-3",
                "description": "Build basic fitness and learn fundamental movements.",
                "workoutDays": [
                    {
                        "day": 1,
                        "title": "Basic Strength & Conditioning",
                        "exercises": [
                            {"name": "Bodyweight Squats", "sets": 3, "reps": "15", "focus": "Leg Strength", "notes": "Focus on form over speed"},
                            {"name": "Push-ups", "sets": 3, "reps": "10-15", "focus": "Upper Body", "notes": "Modify on knees if needed"},
                            {"name": "Plank Hold", "sets": 3, "reps": "30-45 sec", "focus": "Core Stability"},
                            {"name": "Jump Rope", "sets": 3, "reps": "2 min", "focus": "Cardio & Footwork", "notes": "Rest 1 min between sets"},
                        ],
                    },
                    {
                        "day": 2,
                        "title": "Passing & Footwork (Court)",
                        "exercises": [
                            {"name": "Platform Practice", "sets": 5, "reps": "20", "focus": "Passing Form", "notes": "Against wall or with partner"},
                            {"name": "Shuffle Drills", "sets": 4, "reps": "30 sec", "focus": "Lateral Movement", "notes": "Stay low, quick feet"},
                            {"name": "Serve Receive Position", "sets": 3, "reps": "15", "focus": "Ready Position", "notes": "Hold and practice movement"},
                        ],
                    },
                    {
                        "day": 3,
                        "title": "Setting & Approach Basics",
                        "exercises": [
                            {"name": "Wall Setting", "sets": 4, "reps": "25", "focus": "Hand Position", "notes": "Create a window with the hands"},
                            {"name": "Approach Steps (No Jump)", "sets": 5, "reps": "10", "focus": "Footwork Pattern", "notes": "Left-right-left or right-left-right"},
                            {"name": "Vertical Jumps", "sets": 3, "reps": "8", "focus": "Jump Mechanics", "notes": "Focus on arm swing timing"},
                        ],
                    },
                ],
            },
        ],
    },
    {
        "id": "setter-specialist",
        "title": "Setter Development Program",
        "duration": "8 weeks",
        "level": "Intermediate to Advanced",
        "goals": ["Improve Setting Accuracy", "Increase Court Vision", "Develop Quick Hands"],
        "description": (
            "Program for setters: hand speed, accuracy, decision-making "
            "and court leadership."
        ),
        "phases": [
            {
                "name": "Technical Precision",
                "weeks": "Weeks 1-4",
                "description": "Master fundamental setting technique and build consistency.",
                "workoutDays": [
                    {
                        "day": 1,
                        "title": "Hand Speed & Accuracy",
                        "exercises": [
                            {"name": "Wall Setting (Rapid Fire)", "sets": 5, "reps": "50", "focus": "Quick Hands", "notes": "Keep form while increasing speed"},
                            {"name": "Target Setting", "sets": 4, "reps": "20", "focus": "Accuracy", "notes": "Set to targets at different positions"},
                            {"name": "Back Sets", "sets": 3, "reps": "15", "focus": "Technique", "notes": "Arch and follow-through"},
                            {"name": "Jump Setting", "sets": 3, "reps": "12", "focus": "In-Air Control", "notes": "Practice setting while airborne"},
                        ],
                    },
                    {
                        "day": 2,
                        "title": "Strength & Conditioning",
                        "exercises": [
                            {"name": "Finger/Wrist Strengthening", "sets": 3, "reps": "15", "focus": "Hand Strength", "notes": "Resistance bands or grip trainers"},
                            {"name": "Core Rotations", "sets": 3, "reps": "20", "focus": "Torso Stability", "notes": "Body control while setting"},
                            {"name": "Box Jumps", "sets": 4, "reps": "8", "focus": "Vertical"},
                            {"name": "Ladder Drills", "sets": 4, "reps": "30 sec", "focus": "Footwork", "notes": "Quick feet to ball"},
                        ],
                    },
                ],
            },
        ],
    },
]

_BY_ID = {template["id"]: template for template in TRAINING_TEMPLATES}


def list_templates() -> List[Dict[str, Any]]:
    """All built-in templates (copies)."""
    return copy.deepcopy(TRAINING_TEMPLATES)


def get_template(template_id: str) -> Optional[Dict[str, Any]]:
    """A built-in template by id, or None."""
    template = _BY_ID.get(template_id)
    return copy.deepcopy(template) if template is not None else None
