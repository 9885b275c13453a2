#!/usr/bin/env python3
"""
Publishing for the Commute Curator.
Commits and pushes the generated feed to the GitHub Pages repo, then
mirrors it to Cloudflare R2 when credentials are configured.
"""

import os
import subprocess
from pathlib import Path

REPO_DIR = Path(__file__).parent


class PublishError(Exception):
    """Raised when the feed could not be pushed or uploaded."""


def _git(args, cwd):
    try:
        return subprocess.run(
            ["git", *args],
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
        )
    except subprocess.CalledProcessError as e:
        output = (e.stdout or "") + (e.stderr or "")
        raise PublishError(f"git {args[0]} failed: {output.strip()}") from e


def push_feed(feed_path, now, repo_dir=REPO_DIR):
    """Commit the feed file and push it. Returns False if nothing changed."""
    feed_name = os.path.basename(feed_path)
    _git(["add", feed_name], repo_dir)
    try:
        _git(["commit", "-m", f"Update feed {now.strftime('%Y-%m-%d %H:%M')}"], repo_dir)
    except PublishError as e:
        if "nothing to commit" in str(e):
            print("No changes to push.")
            return False
        raise
    _git(["push", "origin", "main"], repo_dir)
    return True


def _get_r2_client():
    """Return (boto3 S3 client, bucket name) or (None, None) if credentials missing."""
    account_id = os.environ.get("CF_ACCOUNT_ID")
    access_key = os.environ.get("R2_ACCESS_KEY_ID")
    secret_key = os.environ.get("R2_SECRET_ACCESS_KEY")

    if not all([account_id, access_key, secret_key]):
        return None, None

    import boto3
    r2 = boto3.client(
        "s3",
        endpoint_url=f"https://{account_id}.r2.cloudflarestorage.com",
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
        region_name="auto",
    )
    bucket = os.environ.get("R2_BUCKET_NAME", "commute-feed")
    return r2, bucket


def upload_to_r2(file_path, object_key):
    """Upload the feed to R2. Skips quietly when credentials are not set."""
    r2, bucket = _get_r2_client()
    if r2 is None:
        print("   ⏭️  R2 credentials not configured, skipping upload")
        return False
    try:
        r2.upload_file(
            str(file_path),
            bucket,
            object_key,
            ExtraArgs={"ContentType": "application/rss+xml"},
        )
    except Exception as e:
        raise PublishError(f"R2 upload failed for {object_key}: {e}") from e
    print(f"   ☁️  Uploaded {object_key}")
    return True


def publish(feed_path, now, repo_dir=REPO_DIR):
    """Push and upload the feed. Failures are reported, never raised."""
    print("\nPushing to GitHub Repo...")
    try:
        pushed = push_feed(feed_path, now, repo_dir=repo_dir)
        upload_to_r2(feed_path, os.path.basename(feed_path))
    except PublishError as e:
        print(f"❌ Failed to publish feed: {e}")
        return False
    if pushed:
        print("✅ Feed published")
    return True
