"""
Configuration Management

PR Inbox 실행 설정 관리
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path
import logging


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class GitHubConfig:
    """GitHub GraphQL API 설정"""
    token: Optional[str] = None
    graphql_url: str = "https://api.github.com/graphql"
    timeout_seconds: int = 30


@dataclass
class RepositoryConfig:
    """대상 저장소"""
    owner: str = ""
    name: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass
class InboxConfig:
    """분류 및 리포트 설정"""
    me: str = ""
    review_teams: List[str] = field(default_factory=lambda: ["Backend"])
    pull_request_limit: int = 100
    comment_limit: int = 10
    review_request_limit: int = 10
    snippet_length: int = 100


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


def _split_names(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig
    repository: RepositoryConfig
    inbox: InboxConfig
    logging: LoggingConfig

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "AppConfig":
        """환경 변수에서 설정 로드"""
        env = os.environ if environ is None else environ
        return cls(
            github=GitHubConfig(
                token=env.get("TOKEN") or env.get("GITHUB_TOKEN"),
                graphql_url=env.get("GITHUB_GRAPHQL_URL", "https://api.github.com/graphql"),
                timeout_seconds=int(env.get("GITHUB_TIMEOUT", "30")),
            ),
            repository=RepositoryConfig(
                owner=env.get("OWNER", ""),
                name=env.get("REPO", ""),
            ),
            inbox=InboxConfig(
                me=env.get("ME", ""),
                review_teams=_split_names(env.get("REVIEW_TEAMS", "Backend")),
                pull_request_limit=int(env.get("PULL_REQUEST_LIMIT", "100")),
                comment_limit=int(env.get("COMMENT_LIMIT", "10")),
                review_request_limit=int(env.get("REVIEW_REQUEST_LIMIT", "10")),
                snippet_length=int(env.get("SNIPPET_LENGTH", "100")),
            ),
            logging=LoggingConfig(
                level=env.get("LOG_LEVEL", "WARNING"),
                format=env.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
                file_path=env.get("LOG_FILE"),
            ),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        # 빈 섹션(`inbox:`)은 None 으로 읽힌다
        inbox_data = dict(config_data.get('inbox') or {})
        if isinstance(inbox_data.get('review_teams'), str):
            inbox_data['review_teams'] = _split_names(inbox_data['review_teams'])

        return cls(
            github=GitHubConfig(**(config_data.get('github') or {})),
            repository=RepositoryConfig(**(config_data.get('repository') or {})),
            inbox=InboxConfig(**inbox_data),
            logging=LoggingConfig(**(config_data.get('logging') or {})),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 토큰 누락은 조회 실패로 드러나므로 여기서 검사하지 않는다
        if not self.inbox.me:
            errors.append("ME (your GitHub login) is required")
        if not self.repository.owner:
            errors.append("OWNER (repository owner) is required")
        if not self.repository.name:
            errors.append("REPO (repository name) is required")

        limits = {
            'pull_request_limit': self.inbox.pull_request_limit,
            'comment_limit': self.inbox.comment_limit,
            'review_request_limit': self.inbox.review_request_limit,
        }
        for name, value in limits.items():
            if not 1 <= value <= 100:
                errors.append(f"{name} must be between 1 and 100")

        if self.inbox.snippet_length <= 0:
            errors.append("snippet_length must be positive")

        if self.github.timeout_seconds <= 0:
            errors.append("timeout_seconds must be positive")

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'graphql_url': self.github.graphql_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'repository': {
                'owner': self.repository.owner,
                'name': self.repository.name,
            },
            'inbox': {
                'me': self.inbox.me,
                'review_teams': list(self.inbox.review_teams),
                'pull_request_limit': self.inbox.pull_request_limit,
                'comment_limit': self.inbox.comment_limit,
                'review_request_limit': self.inbox.review_request_limit,
                'snippet_length': self.inbox.snippet_length,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
        }


def load_config(environ: Optional[Dict[str, str]] = None) -> AppConfig:
    """PR_INBOX_CONFIG 가 있으면 YAML, 없으면 환경 변수에서 로드"""
    env = os.environ if environ is None else environ
    config_path = env.get("PR_INBOX_CONFIG")
    if config_path:
        return AppConfig.from_yaml(config_path)
    return AppConfig.from_env(env)


def setup_logging(logging_config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, logging_config.level.upper()),
        format=logging_config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if logging_config.file_path:
        from logging.handlers import RotatingFileHandler

        handler = RotatingFileHandler(
            logging_config.file_path,
            maxBytes=logging_config.max_file_size,
            backupCount=logging_config.backup_count,
        )
        handler.setFormatter(logging.Formatter(logging_config.format))
        logging.getLogger().addHandler(handler)
