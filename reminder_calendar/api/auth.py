import os
import logging
import datetime
from datetime import timezone

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build

from reminder_calendar.core.config import CREDENTIALS_FILE, TOKEN_FILE, SCOPES
from reminder_calendar.core.errors import BackendError

logger = logging.getLogger(__name__)


class AuthManager:
    """Handles Google OAuth credentials for the holiday calendar."""

    def __init__(self, token_file=TOKEN_FILE, credentials_file=CREDENTIALS_FILE, scopes=SCOPES):
        """Initialize the authentication manager."""
        self.token_file = token_file
        self.credentials_file = credentials_file
        self.scopes = scopes
        self.creds = None
        self.refresh_buffer = 300
        self.service = None

    def load_credentials(self):
        """Load credentials from the token file, running the OAuth flow if needed."""
        if os.path.exists(self.token_file):
            self.creds = Credentials.from_authorized_user_file(self.token_file, self.scopes)

        if not self.creds or not self.creds.valid:
            self.refresh_token()

    def refresh_token_if_needed(self):
        """Refresh the token when it expires within the refresh buffer."""
        if not self.creds:
            self.load_credentials()
            return

        expiry = self.creds.expiry
        if expiry is None:
            return
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)

        time_until_expiry = (expiry - datetime.datetime.now(timezone.utc)).total_seconds()
        if time_until_expiry < self.refresh_buffer:
            logger.info("Token expires in %.1f seconds, refreshing", time_until_expiry)
            self.refresh_token()

    def refresh_token(self):
        """Refresh or create new credentials and store them in the token file."""
        try:
            if self.creds and self.creds.expired and self.creds.refresh_token:
                self.creds.refresh(Request())
            else:
                flow = InstalledAppFlow.from_client_secrets_file(self.credentials_file, self.scopes)
                self.creds = flow.run_local_server(port=0)

            token_dir = os.path.dirname(self.token_file)
            if token_dir:
                os.makedirs(token_dir, exist_ok=True)
            with open(self.token_file, 'w') as token:
                token.write(self.creds.to_json())

            self.service = None
        except Exception as e:
            logger.error("Error refreshing Google token: %s", e)
            raise BackendError(f"Google authentication failed: {e}") from e

    def get_calendar_service(self):
        """Get an authenticated calendar service instance."""
        self.refresh_token_if_needed()
        if self.service is None:
            self.service = build('calendar', 'v3', credentials=self.creds)
        return self.service
