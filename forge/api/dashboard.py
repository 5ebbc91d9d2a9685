"""Self-contained dashboard page served at GET /."""

DASHBOARD_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Forge - Task Coordination</title>
  <style>
    :root {
      --bg: #0a0a0a; --bg-card: #111; --bg-tag: #222; --bg-btn: #222;
      --fg: #00ff41; --fg-muted: #00ff41b3; --border: #333;
      --accent: #00ff41; --accent-hover: #00cc33; --accent-bg: #00ff4122; --accent-badge: #00ff4133;
      --warn: #ffaa00; --warn-badge: #ffaa0033; --danger: #ff4444; --info: #4444ff;
      --muted: #666; --muted-badge: #66666633;
      --transition: background 0.2s, color 0.2s, border-color 0.2s;
    }
    [data-theme="light"] {
      --bg: #f5f5f0; --bg-card: #ffffff; --bg-tag: #e8e8e0; --bg-btn: #e8e8e0;
      --fg: #1a1a1a; --fg-muted: #555; --border: #ccc;
      --accent: #007a1f; --accent-hover: #005a16; --accent-bg: #007a1f18; --accent-badge: #007a1f22;
      --warn: #b37400; --warn-badge: #ffaa0028; --danger: #cc2222; --info: #2244cc;
      --muted: #999; --muted-badge: #99999928;
    }
    * { box-sizing: border-box; margin: 0; padding: 0; }
    body {
      font-family: 'SF Mono', 'Fira Code', monospace;
      background: var(--bg); color: var(--fg);
      padding: 20px; min-height: 100vh; transition: var(--transition);
    }
    h1 { margin-bottom: 20px; border-bottom: 1px solid var(--accent); padding-bottom: 10px; }
    h2 { margin: 20px 0 10px; font-size: 14px; color: var(--fg-muted); }
    .container { max-width: 900px; margin: 0 auto; }
    .create-form { background: var(--bg-card); padding: 15px; border: 1px solid var(--border); margin-bottom: 20px; }
    .create-form input, .create-form select {
      background: var(--bg); border: 1px solid var(--border); color: var(--fg);
      padding: 8px; margin: 5px; font-family: inherit;
    }
    .create-form button {
      background: var(--accent); color: var(--bg); border: none; padding: 8px 16px;
      cursor: pointer; font-family: inherit; font-weight: bold;
    }
    .create-form button:hover { background: var(--accent-hover); }
    .tasks { display: flex; flex-direction: column; gap: 10px; }
    .task {
      background: var(--bg-card); border: 1px solid var(--border); padding: 15px;
      display: flex; justify-content: space-between; align-items: center;
    }
    .task.claimed { border-color: var(--warn); }
    .task.completed { border-color: var(--muted); opacity: 0.6; }
    .task.high { border-left: 3px solid var(--danger); }
    .task.medium { border-left: 3px solid var(--warn); }
    .task.low { border-left: 3px solid var(--info); }
    .task-info { flex: 1; }
    .task-title { font-weight: bold; margin-bottom: 5px; }
    .task-meta { font-size: 12px; color: var(--fg-muted); }
    .task-tags { margin-top: 5px; }
    .tag { display: inline-block; background: var(--bg-tag); padding: 2px 8px; margin-right: 5px; font-size: 11px; border-radius: 3px; }
    .task-actions button {
      background: transparent; border: 1px solid var(--accent); color: var(--accent);
      padding: 5px 12px; margin-left: 5px; cursor: pointer; font-family: inherit; font-size: 12px;
    }
    .task-actions button:hover { background: var(--accent-bg); }
    .task-actions button.unclaim { border-color: var(--warn); color: var(--warn); }
    .status-badge { display: inline-block; padding: 2px 8px; font-size: 10px; margin-left: 10px; text-transform: uppercase; }
    .status-badge.open { background: var(--accent-badge); color: var(--accent); }
    .status-badge.claimed { background: var(--warn-badge); color: var(--warn); }
    .status-badge.completed { background: var(--muted-badge); color: var(--muted); }
    .empty { opacity: 0.5; padding: 10px; }
    .toolbar { position: fixed; top: 20px; right: 20px; display: flex; gap: 8px; }
    .toolbar button {
      background: var(--bg-btn); border: 1px solid var(--border); color: var(--fg);
      padding: 8px 16px; cursor: pointer; font-family: inherit;
    }
    .toolbar button:hover { border-color: var(--accent); }
  </style>
</head>
<body>
  <div class="toolbar">
    <button onclick="toggleTheme()" id="theme-btn">light</button>
    <button onclick="loadTasks()">&#8635; Refresh</button>
  </div>
  <div class="container">
    <h1>&#9874; FORGE</h1>

    <div class="create-form">
      <input type="text" id="title" placeholder="Task title" maxlength="500" style="width: 300px;">
      <input type="text" id="tags" placeholder="Tags (comma-separated)">
      <select id="priority">
        <option value="medium">Medium</option>
        <option value="high">High</option>
        <option value="low">Low</option>
      </select>
      <button onclick="createTask()">+ Create Task</button>
    </div>

    <h2>OPEN TASKS</h2>
    <div id="open-tasks" class="tasks"></div>

    <h2>CLAIMED</h2>
    <div id="claimed-tasks" class="tasks"></div>

    <h2>COMPLETED</h2>
    <div id="completed-tasks" class="tasks"></div>
  </div>

  <script>
    const REFRESH_MS = 5000;

    function escapeHtml(str) {
      if (str === null || str === undefined) return '';
      return String(str).replace(/&/g, '&amp;').replace(/</g, '&lt;').replace(/>/g, '&gt;')
        .replace(/"/g, '&quot;').replace(/'/g, '&#x27;');
    }

    function renderGroup(elementId, tasks, label) {
      document.getElementById(elementId).innerHTML =
        tasks.map(renderTask).join('') || '<div class="empty">No ' + label + ' tasks</div>';
    }

    async function loadTasks() {
      const res = await fetch('/api/tasks');
      const tasks = await res.json();
      renderGroup('open-tasks', tasks.filter(t => t.status === 'open'), 'open');
      renderGroup('claimed-tasks', tasks.filter(t => t.status === 'claimed'), 'claimed');
      renderGroup('completed-tasks', tasks.filter(t => t.status === 'completed'), 'completed');
    }

    function renderTask(task) {
      const id = escapeHtml(task.id);
      const tags = (task.tags || []).map(t => '<span class="tag">' + escapeHtml(t) + '</span>').join('');
      let actions = '';
      if (task.status === 'open') {
        actions = '<button onclick="act(\\'' + id + '\\', \\'claim\\')">Claim</button>';
      } else if (task.status === 'claimed') {
        actions = '<button onclick="completeTask(\\'' + id + '\\')">Complete</button>' +
          '<button class="unclaim" onclick="act(\\'' + id + '\\', \\'unclaim\\')">Unclaim</button>';
      }
      const assignee = task.assignee ? ' | Assigned: ' + escapeHtml(task.assignee) : '';
      const proof = task.proof ? ' | Proof: ' + escapeHtml(task.proof) : '';

      return '<div class="task ' + escapeHtml(task.status) + ' ' + escapeHtml(task.priority) + '">' +
        '<div class="task-info">' +
          '<div class="task-title">' + escapeHtml(task.title) +
            '<span class="status-badge ' + escapeHtml(task.status) + '">' + escapeHtml(task.status) + '</span></div>' +
          '<div class="task-meta">ID: ' + id + ' | Creator: ' + escapeHtml(task.creator) + assignee + proof + '</div>' +
          '<div class="task-tags">' + tags + '</div>' +
        '</div>' +
        '<div class="task-actions">' + actions + '</div>' +
      '</div>';
    }

    async function post(url, body) {
      const res = await fetch(url, {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify(body || {})
      });
      if (!res.ok) {
        const err = await res.json().catch(() => ({}));
        alert(err.detail || 'Request failed');
      }
      return res;
    }

    async function createTask() {
      const title = document.getElementById('title').value;
      const tags = document.getElementById('tags').value;
      const priority = document.getElementById('priority').value;
      if (!title.trim()) return alert('Title required');

      const res = await post('/api/tasks', { title, tags, priority });
      if (res.ok) {
        document.getElementById('title').value = '';
        document.getElementById('tags').value = '';
      }
      loadTasks();
    }

    async function act(id, action) {
      await post('/api/tasks/' + encodeURIComponent(id) + '/' + action);
      loadTasks();
    }

    async function completeTask(id) {
      const proof = prompt('Proof of completion (optional):');
      await post('/api/tasks/' + encodeURIComponent(id) + '/complete', { proof });
      loadTasks();
    }

    function toggleTheme() {
      const html = document.documentElement;
      const next = html.getAttribute('data-theme') === 'light' ? 'dark' : 'light';
      html.setAttribute('data-theme', next);
      document.getElementById('theme-btn').textContent = next === 'light' ? 'dark' : 'light';
      localStorage.setItem('forge-theme', next);
    }

    if (localStorage.getItem('forge-theme') === 'light') {
      document.documentElement.setAttribute('data-theme', 'light');
      document.getElementById('theme-btn').textContent = 'dark';
    }

    loadTasks();
    setInterval(loadTasks, REFRESH_MS);
  </script>
</body>
</html>
"""
