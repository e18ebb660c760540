
###############################################################################
# Google API
###############################################################################
# If modifying these scopes, delete the file token.json.
l_scope = ['https://www.googleapis.com/auth/forms.body',
           'https://www.googleapis.com/auth/forms.responses.readonly',
           'https://www.googleapis.com/auth/drive.file']
f_token = 'token.json'
f_cred = 'credentials.json'
mimetype_form = 'application/vnd.google-apps.form'
url_edit_form = 'https://docs.google.com/forms/d/{id_form}/edit'
url_view_form = 'https://docs.google.com/forms/d/{id_form}/viewform'


###############################################################################
# Form items
###############################################################################
type_title = 'title'
type_pagebreak = 'pageBreak'
dict_type_choice = {'multipleChoice': 'RADIO', 'checkbox': 'CHECKBOX', 'dropdown': 'DROP_DOWN'}
dict_type_grid = {'grid': 'RADIO', 'checkboxGrid': 'CHECKBOX'}
dict_icon_rating = {'star': 'STAR', 'heart': 'HEART', 'thumbUp': 'THUMB_UP'}
dict_collect_email = {'none': 'DO_NOT_COLLECT', 'verified': 'VERIFIED', 'input': 'RESPONDER_INPUT'}


###############################################################################
# Numbering
###############################################################################
sep_number = ' — '
prefix_section = 'Section {idx_section}' + sep_number
prefix_question = 'Q {idx_question}' + sep_number
prefix_question_section = 'Q {idx_section}.{idx_question}' + sep_number
