###############################################################################
# Libraries
###############################################################################
import re
from gform.parameter import type_title, prefix_section, prefix_question, prefix_question_section


# Titles which already carry 'Section 1', 'Q 1', 'Q 1.1', '1. ' or '1) '
re_numbered = re.compile(r'^(Section\s+\d|Q\s+\d|\d+[\.\)]\s)', re.IGNORECASE)


################################################################################
# Number a single title
################################################################################
def is_numbered(title):
    return re_numbered.match(title) is not None

def number_title(prefix, title):
    if is_numbered(title):
        return title
    return prefix + title


################################################################################
# Number sections and questions
################################################################################
def number_sections(l_section):
    # Returns new titles, does not modify l_section
    l_result = []
    for idx_section, section in enumerate(l_section, start = 1):
        title_section = number_title(prefix_section.format(idx_section = idx_section), section['title'])
        l_title_question = number_questions(section.get('questions') or [], idx_section)
        l_result.append({'title_section': title_section, 'l_title_question': l_title_question})

    return l_result

def number_flat_questions(l_question):
    return number_questions(l_question, None)

def number_questions(l_question, idx_section = None):
    idx_question = 1
    l_title = []
    for question in l_question:
        if question['type'] == type_title:
            # Headers are neither numbered nor counted
            l_title.append(question['title'])
            continue
        if idx_section is not None:
            prefix = prefix_question_section.format(idx_section = idx_section, idx_question = idx_question)
        else:
            prefix = prefix_question.format(idx_question = idx_question)
        l_title.append(number_title(prefix, question['title']))
        idx_question += 1

    return l_title
