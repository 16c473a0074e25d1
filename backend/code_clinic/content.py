"""Warm-up questions loaded into a fresh event.

The facilitator dashboard usually replaces these with ``updateQuestions``
before the event starts; they only need to be plausible defaults.
"""

DEFAULT_ROUND1_QUESTIONS = [
    {
        'title': 'Infinite Loop',
        'content': (
            'def calculate_average_grade(grades):\n'
            '    """Calculates the average of a list of grades."""\n'
            '    if not grades:\n'
            '        return 0\n'
            '    total = sum(grades)\n'
            '    # Error: Uses a fixed number (10) instead of the actual list length\n'
            '    average = total / 10\n'
            '    return average'
        ),
    },
    {
        'title': 'Off-by-One Error',
        'content': (
            'def get_final_price(price):\n'
            '    """Calculates final price with incorrect discount logic."""\n'
            '    final_price = float(price)\n'
            '    if final_price > 50:\n'
            '        final_price *= 0.9\n'
            '    if final_price > 100:\n'
            '        final_price *= 0.8\n'
            '    return round(final_price, 2)'
        ),
    },
    {
        'title': 'Null Pointer Exception',
        'content': (
            'def is_in_range(number, min_val, max_val):\n'
            '    """Checks if a number is between min and max, inclusively."""\n'
            '    return number > min_val and number < max_val'
        ),
    },
    {
        'title': 'Incorrect API Endpoint',
        'content': (
            'def get_welcome_message(user_dict, is_logged_in):\n'
            '    if user_dict:\n'
            '        return f"Welcome, {user_dict[\'name\']}!"\n'
            '    else:\n'
            '        return "Welcome, Guest!"'
        ),
    },
    {
        'title': 'CSS Z-Index Issue',
        'content': (
            'def count_odd_numbers(numbers):\n'
            '    count = 0\n'
            '    for num in numbers:\n'
            '        count += 1\n'
            '    return count'
        ),
    },
]

DEFAULT_ROUND2_QUESTIONS = []
