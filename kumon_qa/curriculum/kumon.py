"""
The Kumon curriculum table.

This is the single source of truth for worksheet layout: generators
dispatch on each range's `type` and read its `constraints`, while the QA
layer checks generated problems against the same `type` and
`expected_skills`.
"""
from __future__ import annotations

from kumon_qa.curriculum.models import CurriculumSpec, LevelSpec, WorksheetRange


def _r(start: int, end: int, type: str, description: str, skills: list[str], **constraints) -> WorksheetRange:
    return WorksheetRange(start, end, type, description, tuple(skills), constraints)


# =============================================================================
# Pre-K
# =============================================================================

LEVEL_7A = LevelSpec("7A", "Level 7A: Counting to 10", "Pre-K (Ages 3-4)", 200, "Not timed", [
    _r(1, 30, "count_pictures_to_5", "Counting (Up to 5)", ["count_objects", "recognize_quantities_1_5"], max_count=5),
    _r(31, 100, "count_pictures_to_10", "Counting (Up to 10)", ["count_objects", "recognize_quantities_1_10"], max_count=10),
    _r(101, 150, "match_quantity_to_numeral", "Number Recognition 1-10", ["match_quantity_numeral", "number_recognition"], max_count=10),
    _r(151, 200, "dot_pattern_recognition", "Dot Pattern Recognition", ["subitizing", "pattern_recognition"], max_count=10),
])

LEVEL_6A = LevelSpec("6A", "Level 6A: Counting to 30", "Pre-K (Ages 4-5)", 200, "Not timed", [
    _r(1, 30, "count_to_5", "Counting (Up to 5)", ["count_objects_1_5"], max_count=5),
    _r(31, 100, "count_to_10", "Counting (Up to 10)", ["count_objects_1_10"], max_count=10),
    _r(101, 150, "number_reading_to_10", "Number Reading (1-10)", ["read_numerals_1_10", "match_word_numeral"], max_number=10),
    _r(151, 200, "dot_recognition_to_10", "Dot Recognition (1-10)", ["count_dots", "subitizing"], max_count=10),
])

LEVEL_5A = LevelSpec("5A", "Level 5A: Reading Numbers to 50", "Pre-K/K (Ages 4-5)", 200, "Not timed", [
    _r(1, 100, "number_reading_to_30", "Number Reading (Up to 30)", ["read_numerals_1_30"], max_number=30),
    _r(101, 130, "sequence_to_30", "Sequences (Up to 30)", ["number_sequences", "counting_forward"], max_number=30),
    _r(131, 160, "sequence_to_40", "Sequences (Up to 40)", ["number_sequences", "counting_forward"], max_number=40),
    _r(161, 200, "sequence_to_50", "Sequences (Up to 50)", ["number_sequences", "counting_forward"], max_number=50),
])

LEVEL_4A = LevelSpec("4A", "Level 4A: Writing Numbers to 50", "Kindergarten (Ages 5-6)", 200, "0.5-2 min", [
    _r(1, 40, "trace_number_1_to_10", "Number Tracing (1-10)", ["trace_numerals", "pencil_control"], max_number=10),
    _r(41, 100, "write_number_1_to_10", "Number Writing (1-10)", ["write_numerals_1_10"], max_number=10),
    _r(101, 120, "write_number_1_to_20", "Number Writing (1-20)", ["write_numerals_1_20"], max_number=20),
    _r(121, 140, "write_number_1_to_30", "Number Writing (1-30)", ["write_numerals_1_30"], max_number=30),
    _r(141, 200, "write_number_1_to_50", "Number Writing (1-50)", ["write_numerals_1_50"], max_number=50),
])

# =============================================================================
# Elementary basic
# =============================================================================

LEVEL_3A = LevelSpec("3A", "Level 3A: Adding 1, 2, 3", "K-1 (Ages 5-6)", 200, "1-2 min", [
    _r(1, 70, "number_sequence_to_120", "Numbers up to 120", ["counting_to_120", "number_sequences"], max_number=120),
    _r(71, 130, "adding_1", "Adding 1", ["addition_plus_1"], addends=[1], max_base=10),
    _r(131, 160, "adding_2", "Adding 2", ["addition_plus_2"], addends=[2], max_base=10),
    _r(161, 180, "adding_3", "Adding 3", ["addition_plus_3"], addends=[3], max_base=10),
    _r(181, 200, "adding_up_to_3", "Adding 1, 2, or 3 (Mixed)", ["addition_plus_1", "addition_plus_2", "addition_plus_3"], addends=[1, 2, 3], max_base=10),
])

LEVEL_2A = LevelSpec("2A", "Level 2A: Adding 4-10", "Grade 1 (Ages 6-7)", 200, "1-2 min", [
    _r(1, 10, "review_3a", "Review (Up to 3A)", ["addition_plus_1", "addition_plus_2", "addition_plus_3"], addends=[1, 2, 3], max_base=10),
    _r(11, 30, "adding_4", "Adding 4", ["addition_plus_4"], addends=[4], max_base=10),
    _r(31, 50, "adding_5", "Adding 5", ["addition_plus_5"], addends=[5], max_base=10),
    _r(51, 70, "adding_up_to_5", "Adding up to 5", ["addition_plus_1_to_5"], addends=[1, 2, 3, 4, 5], max_base=10),
    _r(71, 90, "adding_6", "Adding 6", ["addition_plus_6"], addends=[6], max_base=10),
    _r(91, 110, "adding_7", "Adding 7", ["addition_plus_7"], addends=[7], max_base=10),
    _r(111, 130, "adding_up_to_7", "Adding up to 7", ["addition_plus_1_to_7"], addends=[1, 2, 3, 4, 5, 6, 7], max_base=10),
    _r(131, 150, "adding_8", "Adding 8", ["addition_plus_8"], addends=[8], max_base=10),
    _r(151, 160, "adding_9", "Adding 9", ["addition_plus_9"], addends=[9], max_base=10),
    _r(161, 170, "adding_9_and_10", "Adding 9 and 10", ["addition_plus_9", "addition_plus_10"], addends=[9, 10], max_base=10),
    _r(171, 200, "adding_up_to_10", "Adding up to 10", ["addition_plus_1_to_10"], addends=list(range(1, 11)), max_base=10),
])

LEVEL_A = LevelSpec("A", "Level A: Subtraction Introduction", "Grades 1-2 (Ages 6-7)", 200, "1-3 min", [
    _r(1, 80, "addition_review", "Addition Review", ["addition_mastery"], addends=list(range(1, 11)), max_base=20),
    _r(81, 90, "subtracting_1", "Subtracting 1", ["subtraction_minus_1"], subtrahends=[1], max_minuend=10),
    _r(91, 100, "subtracting_2", "Subtracting 2", ["subtraction_minus_2"], subtrahends=[2], max_minuend=10),
    _r(101, 110, "subtracting_3", "Subtracting 3", ["subtraction_minus_3"], subtrahends=[3], max_minuend=10),
    _r(111, 120, "subtracting_up_to_3", "Subtracting up to 3", ["subtraction_minus_1_to_3"], subtrahends=[1, 2, 3], max_minuend=10),
    _r(121, 200, "subtraction_mastery", "Subtraction Mastery", ["subtraction_all"], subtrahends=list(range(1, 11)), max_minuend=20),
])

LEVEL_B = LevelSpec("B", "Level B: Vertical Operations & Regrouping", "Grade 2 (Ages 7-8)", 200, "1-5 min", [
    _r(1, 10, "review_a", "Review (Up to A)", ["horizontal_add_sub"], max_number=20),
    _r(11, 100, "vertical_addition", "Vertical Addition (2-3 digits)", ["vertical_addition", "carrying"], digits=(2, 3), carry_from=41),
    _r(101, 200, "vertical_subtraction", "Vertical Subtraction (2-3 digits)", ["vertical_subtraction", "borrowing"], digits=(2, 3), borrow_from=141),
])

# =============================================================================
# Elementary advanced
# =============================================================================

LEVEL_C = LevelSpec("C", "Level C: Multiplication & Division", "Grade 3 (Ages 8-9)", 200, "2-5 min", [
    _r(1, 10, "review_b", "Review (Up to B)", ["vertical_operations"], digits=(2, 3)),
    _r(11, 14, "times_table_2", "Times Table: 2s", ["multiplication_2"], tables=[2]),
    _r(15, 18, "times_table_3", "Times Table: 3s", ["multiplication_3"], tables=[3]),
    _r(19, 22, "times_table_2_3", "Times Tables: 2s and 3s", ["multiplication_2", "multiplication_3"], tables=[2, 3]),
    _r(23, 26, "times_table_4", "Times Table: 4s", ["multiplication_4"], tables=[4]),
    _r(27, 30, "times_table_5", "Times Table: 5s", ["multiplication_5"], tables=[5]),
    _r(31, 40, "times_table_4_5", "Times Tables: 4s and 5s", ["multiplication_4", "multiplication_5"], tables=[4, 5]),
    _r(41, 44, "times_table_6", "Times Table: 6s", ["multiplication_6"], tables=[6]),
    _r(45, 48, "times_table_7", "Times Table: 7s", ["multiplication_7"], tables=[7]),
    _r(49, 56, "times_table_6_7", "Times Tables: 6s and 7s", ["multiplication_6", "multiplication_7"], tables=[6, 7]),
    _r(57, 60, "times_table_8", "Times Table: 8s", ["multiplication_8"], tables=[8]),
    _r(61, 64, "times_table_9", "Times Table: 9s", ["multiplication_9"], tables=[9]),
    _r(65, 80, "times_table_8_9", "Times Tables: 8s and 9s", ["multiplication_8", "multiplication_9"], tables=[8, 9]),
    _r(81, 110, "multiplication_multi_digit", "Multi-digit Multiplication", ["multiplication_2digit_by_1digit"], multiplicand=(10, 99), multiplier=(2, 9)),
    _r(111, 120, "division_intro", "Division Introduction", ["division_basic"], divisor=(2, 9), quotient=(1, 9), allow_remainder=False),
    _r(121, 200, "division_with_remainder", "Division with Remainders", ["division_remainder"], divisor=(2, 9), quotient=(1, 9), allow_remainder=True),
])

LEVEL_D = LevelSpec("D", "Level D: Long Division & Fractions Intro", "Grade 4 (Ages 9-10)", 200, "2-6 min", [
    _r(1, 50, "multiplication_2x2", "Multi-digit Multiplication", ["multiplication_2digit_by_2digit"], multiplicand=(10, 99), multiplier=(10, 99)),
    _r(51, 130, "long_division", "Long Division", ["long_division_by_2digit"], divisor=(11, 99), quotient=(2, 30), allow_remainder=False),
    _r(131, 140, "fractions_intro", "Fractions Introduction", ["fraction_identification", "fraction_concept"], max_denominator=12),
    _r(141, 200, "fraction_reduction", "Reducing Fractions", ["reduce_fraction", "gcf"], max_denominator=12, max_factor=6),
])

LEVEL_E = LevelSpec("E", "Level E: Fraction Operations", "Grade 5 (Ages 10-11)", 200, "2-6 min", [
    _r(1, 100, "fraction_addition", "Fraction Addition", ["fraction_add_same_denom", "fraction_add_diff_denom"], max_denominator=12, same_denominator_until=50),
    _r(101, 140, "fraction_subtraction", "Fraction Subtraction", ["fraction_subtract"], max_denominator=12),
    _r(141, 170, "fraction_multiplication", "Fraction Multiplication", ["fraction_multiply"], max_denominator=10),
    _r(171, 200, "fraction_division", "Fraction Division", ["fraction_divide"], max_denominator=10),
])

LEVEL_F = LevelSpec("F", "Level F: Decimals & Order of Operations", "Grade 6 (Ages 11-12)", 200, "3-7 min", [
    _r(1, 60, "three_fraction_operations", "3+ Fraction Operations", ["fraction_complex"], max_denominator=8),
    _r(61, 130, "order_of_operations", "Order of Operations (PEMDAS)", ["pemdas", "order_of_operations"], max_number=12),
    _r(131, 180, "fractions_and_decimals", "Fractions and Decimals", ["fraction_decimal_conversion"]),
    _r(181, 200, "decimal_operations", "Decimal Operations", ["decimal_arithmetic"], places=(1, 2)),
])

# =============================================================================
# Middle school
# =============================================================================

LEVEL_G = LevelSpec("G", "Level G: Integers & Pre-Algebra", "Grade 7 (Ages 12-13)", 200, "3-6 min", [
    _r(1, 20, "review_f", "Review (Up to F)", ["fractions", "decimals"], max_denominator=10),
    _r(21, 100, "integer_operations", "Integer Operations", ["integer_add", "integer_subtract", "integer_multiply", "integer_divide"], magnitude=20),
    _r(101, 160, "algebraic_expressions", "Algebraic Expressions", ["evaluate_expression", "simplify_expression"], magnitude=9),
    _r(161, 200, "linear_equations", "Linear Equations", ["solve_linear_equation"], magnitude=12),
])

LEVEL_H = LevelSpec("H", "Level H: Systems & Functions", "Grade 8 (Ages 13-14)", 200, "4-6 min", [
    _r(1, 40, "literal_equations", "Literal Equations", ["solve_for_variable"]),
    _r(41, 120, "simultaneous_equations", "Simultaneous Equations", ["system_2_variables", "system_3_variables"], magnitude=9),
    _r(121, 140, "inequalities", "Inequalities", ["linear_inequality"], magnitude=12),
    _r(141, 180, "functions_and_graphs", "Functions and Graphs", ["function_notation", "linear_graphing"], magnitude=9),
    _r(181, 200, "polynomials", "Polynomials", ["polynomial_operations"], magnitude=9),
])

LEVEL_I = LevelSpec("I", "Level I: Factorization & Quadratics", "Grade 9 (Ages 14-15)", 200, "4-6 min", [
    _r(1, 30, "polynomial_multiplication", "Polynomial Multiplication", ["foil", "special_products"], magnitude=9),
    _r(31, 80, "factorization", "Factorization", ["factor_gcf", "factor_trinomial", "factor_special"], magnitude=9),
    _r(81, 110, "square_roots", "Square Roots", ["simplify_radical", "radical_operations"]),
    _r(111, 140, "quadratic_equations", "Quadratic Equations", ["solve_quadratic"], magnitude=9),
    _r(141, 170, "quadratic_functions", "Quadratic Functions", ["vertex_form", "graph_parabola"], magnitude=6),
    _r(171, 200, "pythagorean_theorem", "Pythagorean Theorem", ["pythagorean_theorem", "distance_formula"]),
])

# =============================================================================
# High school
# =============================================================================

LEVEL_J = LevelSpec("J", "Level J: Advanced Algebra", "Grade 10 (Ages 15-16)", 200, "5-12 min", [
    _r(1, 60, "advanced_factoring", "Advanced Factoring", ["factor_cubes", "factor_grouping"], magnitude=5),
    _r(61, 70, "fractional_expressions", "Fractional Expressions", ["rational_expressions"], magnitude=9),
    _r(71, 90, "irrational_numbers", "Irrational Numbers", ["irrational_operations"]),
    _r(91, 120, "quadratic_equations_advanced", "Advanced Quadratic Equations", ["quadratic_complex_roots"], magnitude=6),
    _r(121, 140, "discriminant", "Discriminant & Root Analysis", ["discriminant", "root_coefficient"], magnitude=9),
    _r(141, 150, "simultaneous_advanced", "Advanced Simultaneous Equations", ["system_nonlinear"], magnitude=6),
    _r(151, 170, "polynomial_division", "Polynomial Division", ["polynomial_long_division", "remainder_theorem"], magnitude=6),
    _r(171, 180, "factor_theorem", "Factor Theorem", ["factor_theorem"], magnitude=5),
    _r(181, 200, "proofs", "Algebraic Proofs", ["identity_proof", "inequality_proof"]),
])

LEVEL_K = LevelSpec("K", "Level K: Functions", "Grades 10-11 (Ages 15-17)", 200, "4-16 min", [
    _r(1, 20, "function_review", "Function Review", ["linear_function", "quadratic_function"], magnitude=9),
    _r(21, 100, "quadratic_functions_advanced", "Advanced Quadratic Functions", ["max_min", "quadratic_inequality"], magnitude=6),
    _r(101, 120, "higher_degree_functions", "Higher Degree Functions", ["cubic_function", "polynomial_end_behavior"], magnitude=5),
    _r(121, 150, "rational_functions", "Rational Functions", ["asymptotes", "rational_graphing"], magnitude=9),
    _r(151, 170, "irrational_functions", "Irrational Functions", ["radical_function"], magnitude=9),
    _r(171, 200, "exponential_functions", "Exponential Functions", ["exponential_graph", "exponential_equation"]),
])

# =============================================================================
# Calculus
# =============================================================================

LEVEL_L = LevelSpec("L", "Level L: Logarithms & Basic Calculus", "Grade 11 (Ages 16-17)", 200, "6-60 min", [
    _r(1, 40, "logarithms", "Logarithmic Functions", ["log_properties", "log_equations"]),
    _r(41, 60, "limits_derivatives", "Limits and Derivatives", ["limit_evaluation", "derivative_definition"], magnitude=9),
    _r(61, 110, "derivative_applications", "Derivative Applications", ["tangent_line", "extrema", "optimization"], magnitude=6),
    _r(111, 170, "integration", "Integration", ["indefinite_integral", "definite_integral"], magnitude=6),
    _r(171, 200, "integration_applications", "Integration Applications", ["area_under_curve", "volume"], magnitude=5),
])

LEVEL_M = LevelSpec("M", "Level M: Trigonometry", "Grades 11-12 (Ages 16-18)", 200, "6-24 min", [
    _r(1, 80, "analytic_geometry", "Analytic Geometry", ["coordinate_geometry", "circles", "loci"], magnitude=9),
    _r(81, 120, "trigonometric_ratios", "Trigonometric Ratios", ["trig_ratios", "unit_circle"]),
    _r(121, 150, "trig_equations", "Trigonometric Equations & Graphs", ["trig_equation", "trig_graph"]),
    _r(151, 180, "addition_formulas", "Addition Formulas", ["sum_difference_formula", "double_angle"]),
    _r(181, 200, "law_of_sines_cosines", "Law of Sines and Cosines", ["law_of_sines", "law_of_cosines"]),
])

LEVEL_N = LevelSpec("N", "Level N: Sequences, Series & Advanced Differentiation", "Grade 12 (Ages 17-18)", 200, "8-50 min", [
    _r(1, 50, "sequences", "Sequences", ["arithmetic_sequence", "geometric_sequence", "recurrence"], magnitude=9),
    _r(51, 60, "mathematical_induction", "Mathematical Induction", ["induction_proof"]),
    _r(61, 100, "series", "Infinite Series", ["infinite_series", "convergence"], magnitude=9),
    _r(101, 140, "limits_advanced", "Advanced Limits", ["limit_function", "continuity"], magnitude=9),
    _r(141, 200, "differentiation_advanced", "Advanced Differentiation", ["trig_derivative", "log_derivative", "implicit_differentiation"], magnitude=9),
])

LEVEL_O = LevelSpec("O", "Level O: Advanced Calculus", "Grade 12+ (Ages 17-18+)", 200, "10-60 min", [
    _r(1, 50, "curve_sketching", "Curve Sketching", ["increasing_decreasing", "concavity", "curve_sketch"], magnitude=6),
    _r(51, 130, "integration_techniques", "Integration Techniques", ["substitution", "integration_by_parts", "partial_fractions"], magnitude=6),
    _r(131, 160, "integration_applications_advanced", "Advanced Integration Applications", ["volume_revolution", "arc_length"], magnitude=4),
    _r(161, 200, "differential_equations", "Differential Equations", ["separable_de", "first_order_de"], magnitude=6),
])

# =============================================================================
# Electives
# =============================================================================

LEVEL_XV = LevelSpec("XV", "Level XV: Vectors", "Elective", 140, "10-40 min", [
    _r(1, 40, "surface_vectors", "2D Vectors", ["vector_2d_operations"], magnitude=9),
    _r(41, 70, "space_vectors", "3D Vectors", ["vector_3d_operations"], magnitude=9),
    _r(71, 100, "inner_products", "Inner Products", ["dot_product", "angle_between_vectors"], magnitude=9),
    _r(101, 140, "lines_planes", "Lines and Planes in Space", ["equation_of_line_3d", "equation_of_plane"], magnitude=9),
])

LEVEL_XM = LevelSpec("XM", "Level XM: Matrices & Transformations", "Elective", 90, "10-30 min", [
    _r(1, 30, "matrix_operations", "Matrix Operations", ["matrix_add", "matrix_multiply", "matrix_inverse"], magnitude=9),
    _r(31, 50, "matrix_equations", "Matrix Equations", ["solve_with_matrices"], magnitude=9),
    _r(51, 90, "transformations", "Transformations", ["reflection", "rotation", "scaling"], magnitude=9),
])

LEVEL_XP = LevelSpec("XP", "Level XP: Permutations, Combinations & Probability", "Elective", 90, "8-24 min", [
    _r(1, 30, "permutations", "Permutations", ["permutation_basic", "permutation_repetition"], max_n=10),
    _r(31, 50, "combinations", "Combinations", ["combination_basic", "binomial_theorem"], max_n=12),
    _r(51, 90, "probability", "Probability", ["probability_basic", "conditional_probability", "expected_value"]),
])

LEVEL_XS = LevelSpec("XS", "Level XS: Statistics", "Elective", 70, "6-20 min", [
    _r(1, 20, "descriptive_stats", "Descriptive Statistics", ["mean_median_mode", "variance_std_dev"], sample_size=(5, 7)),
    _r(21, 50, "distributions", "Distributions", ["binomial_distribution", "normal_distribution"], max_n=6),
    _r(51, 70, "inference", "Statistical Inference", ["confidence_interval", "hypothesis_test"]),
])


KUMON = CurriculumSpec(
    name="Kumon",
    version="1.0",
    levels=[
        LEVEL_7A, LEVEL_6A, LEVEL_5A, LEVEL_4A,
        LEVEL_3A, LEVEL_2A, LEVEL_A, LEVEL_B,
        LEVEL_C, LEVEL_D, LEVEL_E, LEVEL_F,
        LEVEL_G, LEVEL_H, LEVEL_I,
        LEVEL_J, LEVEL_K,
        LEVEL_L, LEVEL_M, LEVEL_N, LEVEL_O,
        LEVEL_XV, LEVEL_XM, LEVEL_XP, LEVEL_XS,
    ],
)
