###############################################################################
# Libraries
###############################################################################
import os
import numpy as np, pandas as pd
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from gform.parameter import *


################################################################################
# Prepare Google API credentials
################################################################################
def prep_api_creds(p_dir, l_scope):
    # Handle Credentials and token
    p_token = os.path.join(p_dir, f_token)
    p_cred = os.path.join(p_dir, f_cred)
    if not os.path.exists(p_cred):
        raise FileNotFoundError(f'{f_cred} not found at {p_cred}\n'
                                'Please download OAuth 2.0 credentials from Google Cloud Console.\n'
                                'See README.md for setup instructions.')

    creds = None
    # The file token.json stores the user's access and refresh tokens, and is
    # created automatically when the authorization flow completes for the first
    # time.
    if os.path.exists(p_token):
        creds = Credentials.from_authorized_user_file(p_token, l_scope)
    # If there are no (valid) credentials available, let the user log in.
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
            print('token.json required refreshment.')
        else:
            flow = InstalledAppFlow.from_client_secrets_file(p_cred, l_scope)
            creds = flow.run_local_server(port = 0)
            print('credentials.json used.')
        # Save the credentials for the next run
        with open(p_token, 'w') as token:
            token.write(creds.to_json())
        print('Token stored to', p_token)

    return creds


################################################################################
# Prepare Google Forms and Google Drive services
################################################################################
def prep_services(p_dir, l_scope = l_scope):
    creds = prep_api_creds(p_dir, l_scope)
    service_forms = build('forms', 'v1', credentials = creds)
    service_drive = build('drive', 'v3', credentials = creds)

    return service_forms, service_drive
