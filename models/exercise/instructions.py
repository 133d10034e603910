"""
Static instructional content for each catalog exercise.

This table is display content only; nothing in it feeds the classifiers.
"""

from dataclasses import dataclass
from typing import Dict, List

from .types import ExerciseType, resolve_exercise


@dataclass(frozen=True)
class ExerciseInstructions:
    """How-to content for one exercise."""
    name: str
    setup: List[str]
    execution: List[str]
    tips: List[str]
    common_mistakes: List[str]


@dataclass(frozen=True)
class ExerciseInfo:
    """Catalog entry shown when choosing an exercise."""
    id: ExerciseType
    name: str
    description: str
    target_muscles: str
    timed: bool = False


EXERCISE_CATALOG: Dict[ExerciseType, ExerciseInfo] = {
    ExerciseType.PUSHUPS: ExerciseInfo(
        ExerciseType.PUSHUPS, "Push-ups", "Upper body strength exercise", "Chest, Arms, Core"),
    ExerciseType.SQUATS: ExerciseInfo(
        ExerciseType.SQUATS, "Squats", "Lower body compound movement", "Legs, Glutes, Core"),
    ExerciseType.PLANKS: ExerciseInfo(
        ExerciseType.PLANKS, "Planks", "Core stability hold", "Core, Shoulders", timed=True),
    ExerciseType.SITUPS: ExerciseInfo(
        ExerciseType.SITUPS, "Sit-ups", "Abdominal strengthening", "Abs, Hip Flexors"),
    ExerciseType.LUNGES: ExerciseInfo(
        ExerciseType.LUNGES, "Lunges", "Unilateral leg exercise", "Legs, Glutes, Balance"),
    ExerciseType.JUMPING_JACKS: ExerciseInfo(
        ExerciseType.JUMPING_JACKS, "Jumping Jacks", "Full body cardio movement", "Full Body, Cardio"),
}

EXERCISE_INSTRUCTIONS: Dict[ExerciseType, ExerciseInstructions] = {
    ExerciseType.PUSHUPS: ExerciseInstructions(
        name="Push-ups",
        setup=[
            "Start in a plank position with hands slightly wider than shoulder-width",
            "Keep your body straight from head to heels",
            "Place hands flat on the floor, fingers pointing forward",
            "Engage your core and keep your head in neutral position",
        ],
        execution=[
            "Lower your body by bending your elbows until chest nearly touches the floor",
            "Keep your elbows at about 45-degree angle to your body",
            "Push back up to starting position with control",
            "Maintain straight body line throughout the movement",
        ],
        tips=[
            "Keep your core tight to prevent sagging hips",
            "Breathe in on the way down, exhale on the way up",
            "Focus on controlled movement rather than speed",
            "Keep your head aligned with your spine",
        ],
        common_mistakes=[
            "Letting hips sag or pike up",
            "Not going down far enough",
            "Flaring elbows too wide",
            "Moving too fast without control",
        ],
    ),
    ExerciseType.SQUATS: ExerciseInstructions(
        name="Squats",
        setup=[
            "Stand with feet shoulder-width apart",
            "Point toes slightly outward",
            "Keep your chest up and shoulders back",
            "Engage your core and keep arms at your sides or crossed",
        ],
        execution=[
            "Lower your body by pushing hips back and bending knees",
            "Keep your chest up and knees tracking over toes",
            "Descend until thighs are parallel to floor (or as low as comfortable)",
            "Drive through heels to return to starting position",
        ],
        tips=[
            "Keep your weight on your heels, not toes",
            "Don't let knees cave inward",
            "Maintain neutral spine throughout",
            "Think of sitting back into an invisible chair",
        ],
        common_mistakes=[
            "Knees caving inward",
            "Not going deep enough",
            "Leaning too far forward",
            "Rising up on toes",
        ],
    ),
    ExerciseType.PLANKS: ExerciseInstructions(
        name="Planks",
        setup=[
            "Start in push-up position or on forearms",
            "Keep your body in straight line from head to heels",
            "Engage your core muscles",
            "Keep your head in neutral position looking down",
        ],
        execution=[
            "Hold the position while maintaining proper form",
            "Breathe normally, don't hold your breath",
            "Keep your hips level, not sagging or piked",
            "Maintain the position for the desired duration",
        ],
        tips=[
            "Focus on quality over duration",
            "Squeeze your glutes to help maintain position",
            "Keep shoulders directly over elbows/hands",
            "Start with shorter holds and build up time",
        ],
        common_mistakes=[
            "Letting hips sag down",
            "Piking hips up too high",
            "Holding breath",
            "Dropping head or looking up",
        ],
    ),
    ExerciseType.SITUPS: ExerciseInstructions(
        name="Sit-ups",
        setup=[
            "Lie on your back with knees bent, feet flat on floor",
            "Place hands behind head or crossed over chest",
            "Keep your feet planted firmly",
            "Engage your core before starting",
        ],
        execution=[
            "Curl your upper body up by contracting your abs",
            "Lift shoulder blades off the ground first",
            "Continue until sitting upright",
            "Lower back down with control to starting position",
        ],
        tips=[
            "Focus on using abs, not pulling with arms",
            "Keep chin off chest to avoid neck strain",
            "Control the movement both up and down",
            "Breathe out as you sit up, in as you lower",
        ],
        common_mistakes=[
            "Pulling on neck with hands",
            "Using momentum instead of muscle control",
            "Not engaging core properly",
            "Bouncing off the floor",
        ],
    ),
    ExerciseType.LUNGES: ExerciseInstructions(
        name="Lunges",
        setup=[
            "Stand tall with feet hip-width apart",
            "Keep your core engaged and chest up",
            "Take a large step forward with one leg",
            "Keep hands on hips or at sides for balance",
        ],
        execution=[
            "Lower your body until both knees form 90-degree angles",
            "Keep front knee over ankle, not pushed forward",
            "Lower back knee toward the ground",
            "Push through front heel to return to starting position",
        ],
        tips=[
            "Keep most of your weight on front leg",
            "Don't let front knee extend past toes",
            "Keep torso upright throughout movement",
            "Step far enough forward for proper form",
        ],
        common_mistakes=[
            "Taking too small of a step",
            "Leaning forward excessively",
            "Letting front knee drift inward",
            "Not lowering back knee enough",
        ],
    ),
    ExerciseType.JUMPING_JACKS: ExerciseInstructions(
        name="Jumping Jacks",
        setup=[
            "Stand upright with feet together",
            "Keep arms at your sides",
            "Engage your core",
            "Keep knees slightly bent and ready to move",
        ],
        execution=[
            "Jump feet apart to shoulder-width while raising arms overhead",
            "Land softly on balls of feet",
            "Jump feet back together while lowering arms to sides",
            "Maintain rhythm and control throughout",
        ],
        tips=[
            "Land softly to reduce impact on joints",
            "Keep core engaged throughout",
            "Maintain steady breathing rhythm",
            "Focus on coordinating arms and legs",
        ],
        common_mistakes=[
            "Landing too hard on heels",
            "Not fully extending arms overhead",
            "Moving too fast and losing coordination",
            "Not engaging core for stability",
        ],
    ),
}


def get_instructions(exercise_id) -> ExerciseInstructions:
    """
    Look up the instructions for an exercise.

    Raises:
        UnknownExerciseError: If the identifier is not in the catalog
    """
    return EXERCISE_INSTRUCTIONS[resolve_exercise(exercise_id)]


def get_exercise_info(exercise_id) -> ExerciseInfo:
    """Catalog entry for an exercise; raises UnknownExerciseError when unknown."""
    return EXERCISE_CATALOG[resolve_exercise(exercise_id)]


def list_exercises() -> List[ExerciseInfo]:
    return list(EXERCISE_CATALOG.values())
