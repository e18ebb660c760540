###############################################################################
# Example form: customer feedback survey
###############################################################################
dict_config_example = {
    'title': 'Customer Feedback Survey',
    'description': 'Please take a moment to share your feedback with us.',
    'questions': [
        {'type': 'text', 'title': 'What is your name?', 'required': True},
        {'type': 'text', 'title': 'Email address', 'required': True},
        {'type': 'multipleChoice', 'title': 'How did you hear about us?', 'required': True,
         'options': ['Search Engine', 'Social Media', 'Friend/Family', 'Advertisement', {'value': 'Other', 'isOther': True}]},
        {'type': 'scale', 'title': 'How satisfied are you with our service?', 'required': True,
         'low': 1, 'high': 5, 'label_low': 'Very Unsatisfied', 'label_high': 'Very Satisfied'},
        {'type': 'checkbox', 'title': 'Which features do you use most?', 'required': False,
         'options': ['Dashboard', 'Reports', 'Analytics', 'Integrations', 'API Access']},
        {'type': 'dropdown', 'title': 'How often do you use our product?', 'required': True,
         'options': ['Daily', 'Weekly', 'Monthly', 'Rarely']},
        {'type': 'text', 'title': 'Any additional comments or suggestions?', 'required': False, 'paragraph': True},
    ]
}
