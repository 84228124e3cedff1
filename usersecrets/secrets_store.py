import json
import os
from .cli_logger import logger
from .errors import UserSecretsError

SECRETS_FILE = "secrets.json"
INVALID_ID_CHARS = set('/\\:*?"<>|') | {chr(c) for c in range(32)}

def secrets_root():
    appdata = os.environ.get("APPDATA")
    if os.name == "nt" and appdata:
        return os.path.join(appdata, "Microsoft", "UserSecrets")
    return os.path.join(os.path.expanduser("~"), ".microsoft", "usersecrets")

def secrets_path_for_id(user_secrets_id):
    """Path of the secrets.json that belongs to a UserSecretsId."""
    if not user_secrets_id or not user_secrets_id.strip():
        raise UserSecretsError("A UserSecretsId is required.")
    for index, char in enumerate(user_secrets_id):
        if char in INVALID_ID_CHARS:
            raise UserSecretsError(
                f"Invalid character '{char}' found in the user secrets ID at index '{index}'."
            )
    if user_secrets_id in (".", ".."):
        raise UserSecretsError(f"'{user_secrets_id}' is not a valid user secrets ID.")
    return os.path.join(secrets_root(), user_secrets_id, SECRETS_FILE)

class SecretsStore:
    """Flat key/value secrets for one UserSecretsId, kept in secrets.json."""

    def __init__(self, user_secrets_id):
        self.user_secrets_id = user_secrets_id
        self.secrets_file = secrets_path_for_id(user_secrets_id)
        self._secrets = self.load()

    def load(self):
        if not os.path.exists(self.secrets_file):
            return {}
        try:
            with open(self.secrets_file, "r", encoding="utf-8") as f:
                content = f.read()
        except IOError as e:
            raise UserSecretsError(f"Error reading secrets file at {self.secrets_file}: {e}") from e
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise UserSecretsError(
                f"Could not parse the JSON file. Error on line {e.lineno}: {self.secrets_file}"
            ) from e
        if not isinstance(data, dict):
            raise UserSecretsError(f"Expected a JSON object in {self.secrets_file}")
        return {str(k): v for k, v in data.items()}

    def __len__(self):
        return len(self._secrets)

    def __contains__(self, key):
        return key in self._secrets

    def items(self):
        return sorted(self._secrets.items())

    def get(self, key, default=None):
        return self._secrets.get(key, default)

    def set(self, key, value):
        self._secrets[key] = value

    def remove(self, key):
        """Drop a key. Returns False when it was not there."""
        if key not in self._secrets:
            return False
        del self._secrets[key]
        return True

    def clear(self):
        self._secrets.clear()

    def save(self):
        os.makedirs(os.path.dirname(self.secrets_file), exist_ok=True)
        with open(self.secrets_file, "w", encoding="utf-8") as f:
            json.dump(self._secrets, f, indent=2)
        logger.verbose(f"Secrets file path {self.secrets_file}.")
