"""Single-page form for submitting a video and reading its summary."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from .sessions import get_session_id

router = APIRouter()

PAGE_HTML = """<!DOCTYPE html>
<html lang="ja">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>YouTube字幕要約</title>
  <style>
    body { font-family: sans-serif; background: #f3f4f6; display: flex; justify-content: center; padding: 2rem; }
    main { background: #fff; border-radius: 8px; box-shadow: 0 10px 25px rgba(0,0,0,.1); padding: 2rem; width: 100%; max-width: 42rem; }
    label { display: block; font-size: .875rem; margin: 1rem 0 .25rem; }
    input, textarea { width: 100%; box-sizing: border-box; padding: .5rem; }
    button { margin-top: 1rem; width: 100%; padding: .5rem; background: #4f46e5; color: #fff; border: 0; border-radius: 4px; }
    button:disabled { opacity: .6; }
    #summary { white-space: pre-wrap; }
    #error { color: #dc2626; margin-top: 1rem; font-size: .875rem; }
    [hidden] { display: none; }
  </style>
</head>
<body>
<main>
  <form id="form">
    <h1>YouTube字幕要約</h1>
    <label for="url">YouTube URL</label>
    <input id="url" type="text" placeholder="https://www.youtube.com/watch?v=..." required>
    <label for="apiKey">Gemini API Key</label>
    <input id="apiKey" type="password">
    <label for="focusPoints">要約ポイント（オプション）</label>
    <textarea id="focusPoints" rows="3" placeholder="例：主要な論点、重要な数字、結論など"></textarea>
    <button id="submit" type="submit">要約する</button>
  </form>
  <section id="result" hidden>
    <h2>要約結果</h2>
    <p id="summary"></p>
    <button id="back" type="button">要約に戻る</button>
  </section>
  <div id="error" hidden></div>
</main>
<script>
  const $ = (id) => document.getElementById(id);

  function render(state) {
    const succeeded = state.state === "succeeded";
    $("form").hidden = succeeded;
    $("result").hidden = !succeeded;
    $("summary").textContent = state.summary || "";
    $("submit").disabled = state.state === "in_flight";
    $("submit").textContent = state.state === "in_flight" ? "処理中..." : "要約する";
    $("error").hidden = !state.error;
    $("error").textContent = state.error || "";
  }

  async function call(path, body) {
    const response = await fetch(path, {
      method: "POST",
      headers: { "Content-Type": "application/json" },
      body: body ? JSON.stringify(body) : undefined,
    });
    const data = await response.json();
    if (!response.ok) {
      render({ state: "failed", error: typeof data.detail === "string" ? data.detail : "予期せぬエラーが発生しました。" });
      return;
    }
    render(data);
  }

  $("form").addEventListener("submit", async (event) => {
    event.preventDefault();
    render({ state: "in_flight" });
    await call("/submit", {
      url: $("url").value,
      api_key: $("apiKey").value,
      focus_points: $("focusPoints").value,
    });
  });

  $("back").addEventListener("click", () => call("/reset"));

  fetch("/state").then((r) => r.json()).then(render);
</script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, dependencies=[Depends(get_session_id)])
async def index():
    return PAGE_HTML
