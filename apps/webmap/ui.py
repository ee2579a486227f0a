# -*- coding: utf-8 -*-
from __future__ import annotations

from html import escape

# NOTE:
# - Keep HTML/JS as a normal triple-quoted string.
# - Do NOT use Python f-strings here: the template contains many `{}` (CSS/JS/template literals).

_INDEX_TEMPLATE = r"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta name="app-root" content="__RITUALMAP_APP_ROOT__" />
  <title>Ritual Map</title>
  <style>
    :root {
      --bg: #0b0f14;
      --panel: #0f1722;
      --text: #e6edf3;
      --muted: #9fb0c0;
      --border: #233042;
      --accent: #79c0ff;
      --region: rgba(121, 192, 255, 0.25);
      --room: rgba(255, 123, 114, 0.45);
      --marker: #7ee787;
    }
    html, body {
      margin: 0; padding: 0;
      background: var(--bg);
      color: var(--text);
      font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
    }
    .topbar {
      position: sticky; top: 0; z-index: 10;
      display: flex; gap: 12px; align-items: center;
      padding: 10px 12px;
      border-bottom: 1px solid var(--border);
      background: rgba(11, 15, 20, 0.92);
    }
    .topbar h1 { font-size: 14px; margin: 0; color: var(--accent); }
    .search { flex: 1; position: relative; }
    .search input {
      width: 100%; box-sizing: border-box;
      padding: 8px 10px; border-radius: 8px;
      border: 1px solid var(--border);
      background: var(--panel); color: var(--text);
    }
    .suggest {
      position: absolute; left: 0; right: 0; top: 40px;
      list-style: none; margin: 0; padding: 0;
      background: var(--panel); border: 1px solid var(--border); border-radius: 8px;
    }
    .suggest li { padding: 6px 10px; cursor: pointer; }
    .suggest li:hover { background: rgba(121, 192, 255, 0.10); }
    .suggest .cat { color: var(--muted); font-size: 11px; margin-left: 8px; }
    main { display: grid; grid-template-columns: 1fr 320px; gap: 12px; padding: 12px; }
    svg { width: 100%; height: 70vh; background: var(--panel); border: 1px solid var(--border); border-radius: 8px; }
    pre { white-space: pre-wrap; font-size: 12px; color: var(--muted); }
  </style>
</head>
<body>
  <div class="topbar">
    <h1>Ritual Map</h1>
    <div class="search">
      <input id="q" autocomplete="off" placeholder="Search creatures, areas, shards, items..." />
      <ul id="suggest" class="suggest" hidden></ul>
    </div>
  </div>
  <main>
    <svg id="map" viewBox="0 0 64 48" preserveAspectRatio="xMidYMid meet"></svg>
    <aside><pre id="info"></pre></aside>
  </main>
<script>
(function () {
  const root = document.querySelector('meta[name="app-root"]').content || '';
  const api = (p) => root + '/api/v1' + p;
  const q = document.getElementById('q');
  const list = document.getElementById('suggest');
  const svg = document.getElementById('map');
  const info = document.getElementById('info');
  const NS = 'http://www.w3.org/2000/svg';

  function ring(coords) { return coords.map((p) => p[0] + ',' + p[1]).join(' '); }

  function draw(geojson) {
    svg.innerHTML = '';
    if (!geojson) return;
    for (const f of geojson.features) {
      const g = f.geometry, props = f.properties || {};
      let el;
      if (g.type === 'Point') {
        el = document.createElementNS(NS, 'circle');
        el.setAttribute('cx', g.coordinates[0]);
        el.setAttribute('cy', g.coordinates[1]);
        el.setAttribute('r', 0.4);
        el.setAttribute('fill', 'var(--marker)');
      } else if (g.type === 'Polygon') {
        el = document.createElementNS(NS, 'polygon');
        el.setAttribute('points', ring(g.coordinates[0]));
        el.setAttribute('fill', props.kind === 'room' ? 'var(--room)' : 'var(--region)');
      } else {
        continue;
      }
      const title = document.createElementNS(NS, 'title');
      title.textContent = props.label || '';
      el.appendChild(title);
      svg.appendChild(el);
    }
    if (geojson.bbox) {
      const [x0, y0, x1, y1] = geojson.bbox;
      svg.setAttribute('viewBox', [x0 - 2, y0 - 2, (x1 - x0) + 4, (y1 - y0) + 4].join(' '));
    }
  }

  function show(res) {
    draw(res.geojson);
    for (const ev of res.events || []) {
      if (ev.event === 'sound') {
        const audio = new Audio(root + ev.src);
        audio.volume = ev.volume;
        audio.play().catch(() => {});
      }
    }
    info.textContent = res.result ? JSON.stringify(res.result, null, 2) : '';
  }

  async function select(item) {
    list.hidden = true;
    q.value = item.name;
    const idx = item.index === null ? '' : '?index=' + item.index;
    const r = await fetch(api('/select/' + item.type + idx), { credentials: 'same-origin' });
    if (r.ok) show(await r.json());
  }

  q.addEventListener('input', async () => {
    const text = q.value;
    if (!text.trim()) { list.hidden = true; return; }
    const r = await fetch(api('/search?q=' + encodeURIComponent(text)), { credentials: 'same-origin' });
    if (!r.ok) return;
    const data = await r.json();
    list.innerHTML = '';
    for (const item of data.items) {
      const li = document.createElement('li');
      li.textContent = item.name;
      if (item.disambiguate) {
        const cat = document.createElement('span');
        cat.className = 'cat';
        cat.textContent = item.type;
        li.appendChild(cat);
      }
      li.addEventListener('click', () => select(item));
      list.appendChild(li);
    }
    list.hidden = data.items.length === 0;
  });

  const deep = new URLSearchParams(window.location.search).get('q');
  if (deep) {
    q.value = deep;
    fetch(api('/lookup?q=' + encodeURIComponent(deep)), { credentials: 'same-origin' })
      .then((r) => r.ok ? r.json() : null)
      .then((res) => { if (res) show(res); });
  }
})();
</script>
</body>
</html>
"""


def render_index_html(app_root: str = "") -> str:
    return _INDEX_TEMPLATE.replace("__RITUALMAP_APP_ROOT__", escape(app_root or "", quote=True))
