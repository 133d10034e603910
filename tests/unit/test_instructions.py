import pytest
from core.exceptions import UnknownExerciseError
from models.exercise.instructions import get_exercise_info, get_instructions, list_exercises
from models.exercise.types import ExerciseType

class TestInstructions:
    
    @pytest.mark.parametrize("exercise", list(ExerciseType))
    def test_every_exercise_has_content(self, exercise):
        """Every catalog exercise has instructions in each section."""
        instructions = get_instructions(exercise)
        
        assert instructions.name
        assert len(instructions.setup) > 0
        assert len(instructions.execution) > 0
        assert len(instructions.tips) > 0
        assert len(instructions.common_mistakes) > 0
    
    def test_lookup_by_identifier(self):
        """Test lookup with a plain catalog string."""
        assert get_instructions("jumpingjacks").name == "Jumping Jacks"
        assert "Letting hips sag or pike up" in get_instructions("pushups").common_mistakes
    
    def test_unknown_exercise(self):
        """Unknown identifiers raise the configuration error."""
        with pytest.raises(UnknownExerciseError):
            get_instructions("yoga")
        with pytest.raises(UnknownExerciseError):
            get_exercise_info("yoga")
    
    def test_catalog(self):
        """The catalog lists six exercises; only planks are timed."""
        catalog = list_exercises()
        
        assert [info.id for info in catalog] == list(ExerciseType)
        assert [info.id for info in catalog if info.timed] == [ExerciseType.PLANKS]
        assert get_exercise_info("squats").target_muscles == "Legs, Glutes, Core"
