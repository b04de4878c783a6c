from pathlib import Path

from blogcontent.settings import Settings, choose_env_file


def test_defaults_match_blog_layout():
    s = Settings()
    assert s.POSTS_EXTENSION == ".mdx"
    assert s.WORDS_PER_MINUTE == 225


def test_posts_path_is_relative_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = Settings(POSTS_DIR="content/posts")
    assert s.posts_path == tmp_path / "content" / "posts"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("WORDS_PER_MINUTE", "200")
    monkeypatch.setenv("POSTS_DIR", "articles")
    s = Settings()
    assert s.WORDS_PER_MINUTE == 200
    assert s.POSTS_DIR == "articles"


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
